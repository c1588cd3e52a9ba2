"""Shared models for questions and answer validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class QuestionKind(str, Enum):
    """How a question is presented and how its default is displayed."""

    CONFIRM = "confirm"
    TEXT = "text"


@dataclass(slots=True, frozen=True)
class Accepted:
    """Validator outcome carrying the value to store."""

    value: Any


@dataclass(slots=True, frozen=True)
class Rejected:
    """Validator outcome carrying a human readable reason."""

    reason: str


ValidationOutcome = Union[Accepted, Rejected]


__all__ = [
    "QuestionKind",
    "Accepted",
    "Rejected",
    "ValidationOutcome",
]
