"""
controller.py
======================

クイズセッションのコントローラ。SessionState を唯一書き換える場所。

状態遷移:

    NOT_STARTED --Start--> LOADING --成功--> READY
                                   --失敗--> ERROR
    READY --Advance--> LOADING
    ERROR --Retry-->   LOADING

UI からはイベント (Start / SelectOption / Advance / Retry) を dispatch() に渡すだけ。
同時に複数の取得が走った場合は、最後に開始したリクエストの結果だけを反映する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .client import QuizClient
from .config import AppConfig
from .history import AnswerHistory
from .logging import get_logger
from .models import Phase, QuizFetchError, QuizItem, SessionState

logger = get_logger(__name__)

FETCH_ERROR_MESSAGE = "クイズの取得に失敗しました"


# ----------------------------------------------------------------------
#  イベント
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class SelectOption:
    option: str


@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class Retry:
    pass


Event = Union[Start, SelectOption, Advance, Retry]


# ----------------------------------------------------------------------
#  QuizController
# ----------------------------------------------------------------------
class QuizController:
    """
    SessionState を保持し、イベントに応じて遷移させる。

    client には fetch_quiz() -> QuizItem を持つオブジェクトを渡す。
    省略した場合は config から QuizClient を組み立てる。
    """

    def __init__(
        self,
        config: AppConfig,
        client=None,
        history: Optional[AnswerHistory] = None,
    ):
        if client is None:
            client = QuizClient(config)
        self.config = config
        self.client = client
        self.history = history if history is not None else AnswerHistory()
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def snapshot(self) -> SessionState:
        """描画用に状態のコピーを返す。"""
        return self._state.copy()

    # ------------------------------------------------------------
    # dispatch
    # ------------------------------------------------------------
    def dispatch(self, event: Event) -> SessionState:
        """イベントを 1 つ処理し、処理後の状態のコピーを返す。"""
        if isinstance(event, Start):
            self.start()
        elif isinstance(event, SelectOption):
            self.select_option(event.option)
        elif isinstance(event, Advance):
            self.advance()
        elif isinstance(event, Retry):
            self.retry()
        else:
            raise TypeError(f"未知のイベントです: {event!r}")
        return self.snapshot()

    # ------------------------------------------------------------
    # 操作
    # ------------------------------------------------------------
    def start(self) -> None:
        if self._state.phase is not Phase.NOT_STARTED:
            return
        self.fetch_quiz()

    def fetch_quiz(self) -> None:
        """
        前の問題・選択・エラーを捨てて LOADING にし、1 問取得する。
        失敗は QuizFetchError として捕まえ、ERROR に落とす。
        """
        request_id = self.begin_fetch()
        try:
            quiz = self.client.fetch_quiz()
        except QuizFetchError as exc:
            self.complete_fetch(request_id, error=exc)
            return
        self.complete_fetch(request_id, quiz=quiz)

    def begin_fetch(self) -> int:
        request_id = self._state.request_id + 1
        self._state = SessionState(phase=Phase.LOADING, request_id=request_id)
        logger.info("quiz_fetch_started", request_id=request_id, url=self.config.quiz_endpoint)
        return request_id

    def complete_fetch(
        self,
        request_id: int,
        quiz: Optional[QuizItem] = None,
        error: Optional[Exception] = None,
    ) -> bool:
        """
        取得結果を反映する。request_id が最新でなければ何もしない。
        反映した場合は True を返す。
        """
        if request_id != self._state.request_id:
            logger.info(
                "quiz_fetch_stale_ignored",
                request_id=request_id,
                latest_request_id=self._state.request_id,
            )
            return False

        if quiz is not None and error is None:
            self._state = SessionState(phase=Phase.READY, current_quiz=quiz, request_id=request_id)
            logger.info("quiz_fetch_succeeded", request_id=request_id, options=len(quiz.options))
        else:
            self._state = SessionState(
                phase=Phase.ERROR,
                error_message=FETCH_ERROR_MESSAGE,
                request_id=request_id,
            )
            logger.error("quiz_fetch_failed", request_id=request_id, error=str(error))
        return True

    def select_option(self, option: str) -> None:
        """READY かつ未回答のときだけ選択を受け付ける。それ以外は何もしない。"""
        state = self._state
        if state.phase is not Phase.READY or state.current_quiz is None:
            return
        if state.selected_option is not None:
            return

        state.selected_option = option
        correct = bool(state.is_correct)
        self.history.record_answer(
            correct_answer=state.current_quiz.correct_answer,
            selected_option=option,
            correct=correct,
            correct_meaning=state.current_quiz.correct_meaning,
        )
        logger.info("quiz_option_selected", request_id=state.request_id, correct=correct)

    def advance(self) -> None:
        self.fetch_quiz()

    def retry(self) -> None:
        self.fetch_quiz()
