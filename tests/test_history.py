"""Tests for the in-session answer history."""

from __future__ import annotations

from spanish_quiz.history import AnswerHistory


def test_empty_history():
    history = AnswerHistory()

    assert history.total == 0
    assert history.correct_count == 0
    assert history.accuracy() is None
    assert history.records() == []


def test_accuracy_and_records():
    history = AnswerHistory()
    history.record_answer("b", "b", True, correct_meaning="letter b")
    history.record_answer("gato", "perro", False)
    history.record_answer("sol", "sol", True)

    assert history.total == 3
    assert history.correct_count == 2
    assert history.accuracy() == 2 / 3
    first = history.records()[0]
    assert first["selected_option"] == "b"
    assert first["correct_meaning"] == "letter b"
    assert "timestamp" in first


def test_records_are_copies():
    history = AnswerHistory()
    history.record_answer("b", "a", False)

    history.records()[0]["correct"] = True

    assert history.correct_count == 0


def test_clear():
    history = AnswerHistory()
    history.record_answer("b", "a", False)

    history.clear()

    assert history.total == 0
