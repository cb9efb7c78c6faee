"""
client.py
======================

クイズ生成サービス (GET {base_url}/generate-quiz) を呼び出すクライアント。

失敗はすべて QuizFetchError に変換して送出する:
- 接続エラー / タイムアウト
- 2xx 以外のステータス
- JSON として読めないレスポンス
- 想定と違う形の JSON
"""

from __future__ import annotations

from typing import Optional

import requests

from .config import AppConfig
from .logging import get_logger
from .models import QuizFetchError, QuizItem

__all__ = ["QuizClient", "QuizFetchError"]

logger = get_logger(__name__)


class QuizClient:
    """
    /generate-quiz への GET を 1 回行い、QuizItem を返す。

    session を渡せばそれを使う（テストや接続の使い回し用）。
    """

    def __init__(self, config: AppConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def fetch_quiz(self) -> QuizItem:
        url = self.config.quiz_endpoint
        try:
            response = self.session.get(url, timeout=self.config.request_timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.Timeout as exc:
            raise QuizFetchError(f"タイムアウトしました: {url}") from exc
        except requests.exceptions.RequestException as exc:
            raise QuizFetchError(f"リクエストに失敗しました: {exc}") from exc
        except ValueError as exc:
            # JSON デコード失敗
            raise QuizFetchError("レスポンスが JSON ではありません") from exc

        quiz = QuizItem.from_payload(payload)
        logger.debug("quiz_payload_parsed", url=url, options=len(quiz.options))
        return quiz
