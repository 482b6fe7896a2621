# SPDX-License-Identifier: MIT
"""Question/answer plumbing for interactive commands.

Commands never read the console directly. They ask an AnswerSource, which is
ConsoleAnswers when run from a terminal and ScriptedAnswers when the answers
are known up front (tests, scripted setups).
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Protocol, Sequence, TypeVar

import click

from .main import echo_error
from .validators import ValidationError

T = TypeVar("T")


class AnswersExhaustedError(Exception):
    """Raised when a ScriptedAnswers runs out of answers."""

    def __init__(self, prompt: str):
        self.prompt = prompt
        super().__init__(f"No scripted answer left for prompt: {prompt!r}")


class AnswerSource(Protocol):
    """Something that can answer the wizard's questions."""

    def ask(self, prompt: str, default: Optional[str]) -> str:
        """Return one line of input, or ``default`` (or "") if it was empty."""
        ...

    def select(self, prompt: str, items: Sequence[str], default: int) -> int:
        """Return the index of the chosen item."""
        ...

    def confirm(self, prompt: str, default: bool) -> bool:
        ...


class ConsoleAnswers:
    """Answers read from the terminal through click."""

    def ask(self, prompt: str, default: Optional[str]) -> str:
        return click.prompt(
            prompt,
            default=default if default is not None else "",
            show_default=bool(default),
        )

    def select(self, prompt: str, items: Sequence[str], default: int) -> int:
        for number, item in enumerate(items, start=1):
            click.echo(f"  {number}) {item}")
        choice = click.prompt(
            prompt,
            type=click.IntRange(1, len(items)),
            default=default + 1,
        )
        return choice - 1

    def confirm(self, prompt: str, default: bool) -> bool:
        return click.confirm(prompt, default=default)


class ScriptedAnswers:
    """Answers replayed from a fixed list.

    An empty string behaves like pressing enter. For ``select`` an answer is
    either an item label (case-insensitive) or its 1-based number; for
    ``confirm`` it is y/yes/n/no.

    Attributes:
        asked: Every prompt asked so far, in order
    """

    def __init__(self, answers: Iterable[str]):
        self._answers = list(answers)
        self._position = 0
        self.asked: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers) - self._position

    def _next(self, prompt: str) -> str:
        self.asked.append(prompt)
        if self._position >= len(self._answers):
            raise AnswersExhaustedError(prompt)
        answer = self._answers[self._position]
        self._position += 1
        return answer

    def ask(self, prompt: str, default: Optional[str]) -> str:
        answer = self._next(prompt)
        if answer == "" and default is not None:
            return default
        return answer

    def select(self, prompt: str, items: Sequence[str], default: int) -> int:
        answer = self._next(prompt).strip()
        if answer == "":
            return default
        for index, item in enumerate(items):
            if item.lower() == answer.lower():
                return index
        if answer.isdigit() and 1 <= int(answer) <= len(items):
            return int(answer) - 1
        raise ValueError(f"{answer!r} is not one of: {', '.join(items)}")

    def confirm(self, prompt: str, default: bool) -> bool:
        answer = self._next(prompt).strip().lower()
        if answer == "":
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        raise ValueError(f"{answer!r} is not a yes/no answer")


def ask(answers: AnswerSource, prompt: str, default: Optional[str] = None) -> Optional[str]:
    """Ask one free-text question. An empty answer with no default is None."""
    value = answers.ask(prompt, default)
    return value or None


def ask_until_valid(
    answers: AnswerSource,
    prompt: str,
    default: Optional[str],
    validator: Callable[[str], T],
) -> T:
    """Ask until ``validator`` accepts the answer, then return its result.

    Pressing enter supplies ``default``; with no default the validator sees "".
    Rejections are printed and the same question is asked again, with no
    limit on attempts.
    """
    while True:
        value = answers.ask(prompt, default)
        try:
            return validator(value)
        except ValidationError as e:
            echo_error(str(e))
