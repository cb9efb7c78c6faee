"""
ui.py
======================

Streamlit ベースの UI コンポーネントをまとめたモジュール。

責務:
- 問題画面の描画（画像・選択肢・正誤メッセージ・次へボタン）
- 開始画面 / 読み込み中 / エラー表示
- スコアと解答履歴の表示

build_quiz_view() は描画内容だけを決める純粋関数で、Streamlit に依存しない。
render_* 関数は QuizView を受け取って描画し、ユーザー操作は
コントローラから渡されたコールバック (on_select / on_next など) に伝えるだけ。
状態を直接書き換えることはしない。
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import streamlit as st

from .history import AnswerHistory
from .models import QuizItem

# ----------------------------------------------------------------------
#  表示文言
# ----------------------------------------------------------------------
CORRECT_TEMPLATE = "正解です！「{answer}」は「{meaning}」という意味です。"
INCORRECT_TEMPLATE = "不正解！正解は「{answer}」（{meaning}）です。"

START_LABEL = "開始"
LOADING_LABEL = "読み込み中..."
RETRY_LABEL = "再読み込み"
NEXT_LABEL = "次の問題へ"
RESET_LABEL = "成績をリセット"

MARK_CORRECT = "✅"
MARK_INCORRECT = "❌"


# ----------------------------------------------------------------------
#  表示モデル
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class OptionView:
    label: str
    disabled: bool
    selected: bool
    # 選択された選択肢だけに ✅ / ❌ を付ける
    marker: str = ""


@dataclass(frozen=True)
class QuizView:
    image_url: str
    options: Tuple[OptionView, ...]
    result_message: Optional[str]
    is_correct: Optional[bool]
    show_next: bool


def result_message(quiz: QuizItem, is_correct: bool) -> str:
    template = CORRECT_TEMPLATE if is_correct else INCORRECT_TEMPLATE
    return template.format(answer=quiz.correct_answer, meaning=quiz.correct_meaning)


def build_quiz_view(
    quiz: QuizItem,
    selected_option: Optional[str],
    is_correct: Optional[bool],
) -> QuizView:
    """
    (quiz, selected_option, is_correct) から描画内容を決める。
    同じ入力には常に同じ QuizView を返す。
    """
    answered = selected_option is not None

    options: List[OptionView] = []
    for option in quiz.options:
        selected = answered and option == selected_option
        marker = ""
        if selected:
            marker = MARK_CORRECT if is_correct else MARK_INCORRECT
        options.append(
            OptionView(label=option, disabled=answered, selected=selected, marker=marker)
        )

    message = None
    if answered and is_correct is not None:
        message = result_message(quiz, is_correct)

    return QuizView(
        image_url=quiz.image_url,
        options=tuple(options),
        result_message=message,
        is_correct=is_correct if answered else None,
        show_next=answered,
    )


# ----------------------------------------------------------------------
#  ヘッダー / スコア
# ----------------------------------------------------------------------
def render_header(title: str, history: Optional[AnswerHistory] = None) -> None:
    st.markdown(f"## {title}")
    if history is not None and history.total:
        accuracy = history.accuracy() or 0.0
        st.caption(
            f"このセッションの成績: {history.correct_count} / {history.total} 問正解"
            f"（{int(accuracy * 100)}%）"
        )


def render_history(history: AnswerHistory, on_reset: Optional[Callable[[], None]] = None) -> None:
    """これまでの解答を表で表示する（セッション中のみ）。on_reset があればリセットボタンも出す。"""
    if not history.total:
        return

    import pandas as pd

    rows = [
        {
            "正解": r["correct_answer"],
            "意味": r["correct_meaning"],
            "あなたの解答": r["selected_option"],
            "結果": MARK_CORRECT if r["correct"] else MARK_INCORRECT,
        }
        for r in history.records()
    ]
    with st.expander("これまでの解答"):
        st.dataframe(pd.DataFrame(rows), width="stretch", hide_index=True)
        if on_reset is not None:
            st.button(RESET_LABEL, key="sq_reset_score", on_click=on_reset)


# ----------------------------------------------------------------------
#  各フェーズの描画
# ----------------------------------------------------------------------
def render_start(on_start: Callable[[], None]) -> None:
    st.button(START_LABEL, key="sq_start", on_click=on_start, type="primary")


def render_loading() -> None:
    st.info(LOADING_LABEL)


def render_error(message: str, on_retry: Callable[[], None]) -> None:
    st.error(message)
    st.button(RETRY_LABEL, key="sq_retry", on_click=on_retry)


def render_quiz_content(
    view: QuizView,
    on_select: Callable[[str], None],
    on_next: Callable[[], None],
) -> None:
    """
    問題画面を描画する。

    on_select:
        選択肢ボタンが押されたときに選択肢の文字列を渡して呼ぶ。
    on_next:
        「次の問題へ」が押されたときに呼ぶ。
    """
    # 画像の場所はブラウザに解決させる（相対パスでも選択肢の描画は止めない）
    st.markdown(image_html(view.image_url), unsafe_allow_html=True)

    # 2 列のグリッドに並べる
    cols = st.columns(2)
    for idx, option in enumerate(view.options):
        label = f"{option.marker} {option.label}" if option.marker else option.label
        with cols[idx % 2]:
            st.button(
                label,
                key=f"sq_option_{idx}",
                disabled=option.disabled,
                on_click=on_select,
                args=(option.label,),
                width="stretch",
            )

    if view.result_message is not None:
        if view.is_correct:
            st.success(view.result_message)
        else:
            st.error(view.result_message)

    if view.show_next:
        st.button(NEXT_LABEL, key="sq_next", on_click=on_next, type="primary")


def image_html(url: str) -> str:
    return (
        "<div class='sq-image'>"
        f"<img src=\"{html.escape(url, quote=True)}\" alt=\"quiz\" "
        "style='width:100%; height:auto; border-radius:8px; margin-bottom:1rem;'>"
        "</div>"
    )
