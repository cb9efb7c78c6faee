"""
spanish_quiz パッケージ
======================

スペイン語クイズアプリの内部ロジックを提供する。

主な役割:
- 設定管理（config）
- クイズデータとセッション状態（models）
- クイズ生成サービスのクライアント（client）
- 状態遷移を担うコントローラ（controller）
- セッション中の解答履歴（history）
- UI コンポーネント（ui）

app.py は Streamlit のページ組み立てのみを担当し、内部ロジックはすべて本パッケージから呼ぶ。
"""

from .config import AppConfig
from .models import Phase, QuizFetchError, QuizItem, SessionState
from .client import QuizClient
from .controller import Advance, QuizController, Retry, SelectOption, Start
from .history import AnswerHistory

__all__ = [
    "AppConfig",
    "Phase",
    "QuizFetchError",
    "QuizItem",
    "SessionState",
    "QuizClient",
    "QuizController",
    "Start",
    "SelectOption",
    "Advance",
    "Retry",
    "AnswerHistory",
]
