"""Prompting seam: one line of text from a human, plus typed answers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar

import typer
from rich.markup import escape

from sunrise.console import console
from sunrise.errors import InputParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Prompter(Protocol):
    """Anything that can ask for one line of input."""

    def line(self, message: str) -> str: ...


class TerminalPrompter:
    """Reads answers from the terminal via typer/click."""

    def line(self, message: str) -> str:
        return typer.prompt(message, default="", show_default=False, prompt_suffix="")


class Decision(Enum):
    YES = "yes"
    NO = "no"


_YES = {"y", "yes", "yes please"}
_NO = {"n", "no", "no thanks"}


def parse_decision(text: str) -> Decision:
    answer = text.strip().lower()
    if answer in _YES:
        return Decision.YES
    if answer in _NO:
        return Decision.NO
    raise InputParseError(f"expected yes or no, got {text!r}")


class ReviewAction(Enum):
    UPDATE = "update"
    SKIP = "skip"
    DELETE = "delete"


@dataclass(frozen=True)
class ReviewDecision:
    action: ReviewAction
    text: str = ""


def parse_review_decision(text: str) -> ReviewDecision:
    """Empty input skips, ``d`` deletes, anything else is the new description."""
    if text == "":
        return ReviewDecision(ReviewAction.SKIP)
    if text.lower() == "d":
        return ReviewDecision(ReviewAction.DELETE)
    return ReviewDecision(ReviewAction.UPDATE, text)


def ask(
    prompter: Prompter,
    message: str,
    parser: Callable[[str], T],
    default: T | None = None,
) -> T:
    """Prompt until *parser* accepts the answer.

    Empty input returns *default* when one is given.
    """
    while True:
        answer = prompter.line(message)
        if answer == "" and default is not None:
            return default
        try:
            return parser(answer)
        except InputParseError as e:
            logger.debug("rejected answer: %s", e)
            console.print(f"[red]{escape(str(e))}[/red]")
