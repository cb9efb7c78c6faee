"""
models.py
======================

クイズ 1 問分のデータ (QuizItem) と、セッション状態 (SessionState) の定義。

- QuizItem はクイズ生成サービスから受け取る 1 問分のデータ
- SessionState はコントローラだけが書き換える画面状態
- Phase は画面の大まかな状態 (未開始 / 読み込み中 / エラー / 出題中)

correct_answer が options に含まれているかどうかは検証しない。
サービス側がこれを保証している前提で扱う。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, List, Optional


class QuizFetchError(Exception):
    """クイズの取得に失敗したことを表す唯一の例外。

    通信エラー・タイムアウト・HTTP ステータス異常・不正なレスポンスを区別しない。
    """


class Phase(str, Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


# ----------------------------------------------------------------------
#  QuizItem
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class QuizItem:
    """クイズ 1 問分。options の並び順がそのまま表示順になる。"""

    image_url: str
    options: List[str]
    correct_answer: str
    correct_meaning: str

    @classmethod
    def from_payload(cls, data: Any) -> "QuizItem":
        """
        /generate-quiz の JSON を QuizItem に変換する。

        想定する形:
            {
              "image_url": "...",
              "quiz_options": ["...", "..."],
              "correct_answer": "...",
              "correct_meaning": "..."
            }

        形が違う場合は QuizFetchError を送出する。
        """
        if not isinstance(data, dict):
            raise QuizFetchError(f"レスポンスが JSON オブジェクトではありません: {type(data).__name__}")

        for key in ("image_url", "correct_answer", "correct_meaning"):
            if not isinstance(data.get(key), str):
                raise QuizFetchError(f"フィールド {key} が文字列ではありません")

        options = data.get("quiz_options")
        if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
            raise QuizFetchError("フィールド quiz_options が文字列の配列ではありません")

        return cls(
            image_url=data["image_url"],
            options=list(options),
            correct_answer=data["correct_answer"],
            correct_meaning=data["correct_meaning"],
        )


# ----------------------------------------------------------------------
#  SessionState
# ----------------------------------------------------------------------
@dataclass
class SessionState:
    """
    コントローラが保持する画面状態。

    不変条件:
    - current_quiz は phase == READY のときだけ存在する
    - error_message は phase == ERROR のときだけ存在する
    - selected_option は 1 問につき 1 回だけセットされる
    """

    phase: Phase = Phase.NOT_STARTED
    current_quiz: Optional[QuizItem] = None
    selected_option: Optional[str] = None
    error_message: Optional[str] = None
    # 最後に開始したリクエストの番号（後勝ち判定に使う）
    request_id: int = 0

    @property
    def is_correct(self) -> Optional[bool]:
        if self.selected_option is None or self.current_quiz is None:
            return None
        return self.selected_option == self.current_quiz.correct_answer

    def copy(self) -> "SessionState":
        return replace(self)
