"""Pytest configuration.

The repository root is not automatically added to ``sys.path`` when
running tests from the ``tests`` directory.  Adding an explicit
``conftest.py`` ensures that the :mod:`ginit` package can be imported
directly by test modules.

It also provides :class:`FakePrompter`, which answers questions from a
script instead of the terminal.
"""

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


class FakePrompter:
    """Replays *answers* in order.  ``None`` accepts the question's default."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.asked = []

    def _next(self, message, default):
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"unexpected question: {message}")
        answer = self.answers.pop(0)
        return default if answer is None else answer

    def text(self, message, default=None):
        return self._next(message, default if default is not None else "")

    def password(self, message):
        return self._next(message, "")

    def choice(self, message, choices, default):
        return self._next(message, default)

    def checkbox(self, message, choices, default=()):
        self.checkbox_choices = list(choices)
        self.checkbox_default = list(default)
        return self._next(message, list(default))


@pytest.fixture
def prompter_factory():
    return FakePrompter
