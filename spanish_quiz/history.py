"""
history.py
=====================================

セッション中の解答履歴を管理するモジュール。

アプリを閉じると消える（永続化はしない）。
画面上部のスコア表示と「これまでの解答」表に使う。
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional


class AnswerHistory:
    """
    解答履歴とスコアを管理するクラス。
    """

    def __init__(self) -> None:
        self._records: List[Dict[str, Any]] = []

    # ---------------------------------------------------------
    # 履歴を追加
    # ---------------------------------------------------------
    def record_answer(
        self,
        correct_answer: str,
        selected_option: str,
        correct: bool,
        correct_meaning: Optional[str] = None,
    ) -> None:
        """1 問分の解答を記録する。"""
        self._records.append(
            {
                "correct_answer": correct_answer,
                "correct_meaning": correct_meaning,
                "selected_option": selected_option,
                "correct": correct,
                "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            }
        )

    # ---------------------------------------------------------
    # 状態を取得（UI 用）
    # ---------------------------------------------------------
    @property
    def total(self) -> int:
        return len(self._records)

    @property
    def correct_count(self) -> int:
        return sum(1 for r in self._records if r["correct"])

    def accuracy(self) -> Optional[float]:
        """正答率 (0.0〜1.0)。まだ 1 問も解いていなければ None。"""
        if not self._records:
            return None
        return self.correct_count / self.total

    def records(self) -> List[Dict[str, Any]]:
        return [dict(r) for r in self._records]

    def clear(self) -> None:
        self._records.clear()
