"""
app.py
======================

スペイン語クイズアプリ（Streamlit）エントリーポイント。

流れ:
- 「開始」で 1 問目を取得
- 画像と選択肢を表示し、1 つ選ぶとその場で正誤と意味を表示
- 「次の問題へ」で次の 1 問を取得
- 取得に失敗した場合はエラーと「再読み込み」を表示

前提:
- config.toml の [api].base_url または環境変数 QUIZ_API_BASE_URL に
  クイズ生成サービスのベース URL が設定されている
"""

from __future__ import annotations

import streamlit as st

from spanish_quiz.config import AppConfig
from spanish_quiz.controller import Advance, Event, QuizController, Retry, SelectOption, Start
from spanish_quiz.logging import configure_logging
from spanish_quiz.models import Phase
from spanish_quiz.ui import (
    LOADING_LABEL,
    build_quiz_view,
    render_error,
    render_header,
    render_history,
    render_loading,
    render_quiz_content,
    render_start,
)


# ----------------------------------------------------------------------
#  アプリ設定読み込み
# ----------------------------------------------------------------------
def load_app_config() -> AppConfig:
    """起動時に 1 回だけ設定を読み込み、ログを初期化する。"""
    if "app_config" in st.session_state:
        return st.session_state["app_config"]

    cfg = AppConfig.load()
    configure_logging(cfg)
    st.session_state["app_config"] = cfg
    return cfg


# ----------------------------------------------------------------------
#  QuizController のラッパー
# ----------------------------------------------------------------------
def get_controller() -> QuizController:
    """QuizController をセッションに保持して返す。"""
    if "quiz_controller" not in st.session_state:
        st.session_state["quiz_controller"] = QuizController(load_app_config())
    return st.session_state["quiz_controller"]  # type: ignore[return-value]


def dispatch(event: Event) -> None:
    """ボタンのコールバックから呼ばれる。取得を伴うイベントはスピナーを出す。"""
    controller = get_controller()
    if isinstance(event, SelectOption):
        controller.dispatch(event)
        return
    with st.spinner(LOADING_LABEL):
        controller.dispatch(event)


# ----------------------------------------------------------------------
#  ページ: クイズ
# ----------------------------------------------------------------------
def render_quiz_main_page() -> None:
    cfg = load_app_config()
    controller = get_controller()
    state = controller.snapshot()

    render_header(cfg.app_title, controller.history)

    if state.phase is Phase.NOT_STARTED:
        render_start(lambda: dispatch(Start()))
    elif state.phase is Phase.LOADING:
        render_loading()
    elif state.phase is Phase.ERROR:
        render_error(state.error_message or "", lambda: dispatch(Retry()))
    elif state.current_quiz is not None:
        view = build_quiz_view(state.current_quiz, state.selected_option, state.is_correct)
        render_quiz_content(
            view,
            on_select=lambda option: dispatch(SelectOption(option)),
            on_next=lambda: dispatch(Advance()),
        )

    render_history(controller.history, on_reset=controller.history.clear)


# ----------------------------------------------------------------------
#  メイン
# ----------------------------------------------------------------------
def main() -> None:
    cfg = load_app_config()
    st.set_page_config(
        page_title=cfg.app_title,
        page_icon="🇪🇸",
        layout="centered",
    )
    render_quiz_main_page()


if __name__ == "__main__":
    main()
