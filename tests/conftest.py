"""Shared fixtures for the quiz tests."""

from __future__ import annotations

from collections import deque

import pytest

from spanish_quiz.config import AppConfig
from spanish_quiz.controller import QuizController
from spanish_quiz.models import QuizFetchError, QuizItem


class FakeQuizClient:
    """Returns queued outcomes in order; an exception instance is raised instead of returned."""

    def __init__(self, *outcomes):
        self.outcomes = deque(outcomes)
        self.calls = 0
        self.controller = None
        self.phases_seen = []

    def queue(self, *outcomes) -> None:
        self.outcomes.extend(outcomes)

    def fetch_quiz(self) -> QuizItem:
        self.calls += 1
        if self.controller is not None:
            self.phases_seen.append(self.controller.state.phase)
        outcome = self.outcomes.popleft()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def sample_payload():
    """The payload the quiz service returns in the basic scenario."""
    return {
        "image_url": "img1.png",
        "quiz_options": ["a", "b", "c", "d"],
        "correct_answer": "b",
        "correct_meaning": "letter b",
    }


@pytest.fixture
def sample_quiz(sample_payload):
    return QuizItem.from_payload(sample_payload)


@pytest.fixture
def second_quiz():
    return QuizItem(
        image_url="img2.png",
        options=["perro", "gato", "casa", "sol"],
        correct_answer="gato",
        correct_meaning="猫",
    )


@pytest.fixture
def config():
    return AppConfig(api_base_url="http://quiz.test")


@pytest.fixture
def fetch_failure():
    return QuizFetchError("connection refused")


@pytest.fixture
def make_controller(config):
    """Build a controller wired to a FakeQuizClient with the given outcomes."""

    def _make(*outcomes):
        client = FakeQuizClient(*outcomes)
        controller = QuizController(config, client=client)
        client.controller = controller
        return controller, client

    return _make
