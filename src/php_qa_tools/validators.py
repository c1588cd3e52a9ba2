"""Answer validators for the setup wizard.

Validators take the raw answer (already replaced by the default when the
user entered nothing) and return :class:`Accepted` or :class:`Rejected`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from .models import Accepted, Rejected, ValidationOutcome

Validator = Callable[[str], ValidationOutcome]

_YES = ("y", "yes")
_NO = ("n", "no")


def validate_confirmation(answer: str) -> ValidationOutcome:
    """Parse a case-insensitive yes/no answer."""

    normalized = answer.strip().lower()
    if normalized in _YES:
        return Accepted(True)
    if normalized in _NO:
        return Accepted(False)
    return Rejected("Please answer yes or no")


def choice_validator(choices: Sequence[str], message: str) -> Validator:
    """Accept only members of ``choices``, compared case-sensitively."""

    allowed = tuple(choices)

    def _validate(answer: str) -> ValidationOutcome:
        if answer in allowed:
            return Accepted(answer)
        return Rejected(message)

    return _validate


def path_exists(root: Path, relative: str) -> bool:
    """Check ``root/relative`` exists, file or directory."""

    try:
        return Path(f"{root}/{relative}").exists()
    except OSError:
        return False


def path_validator(root: Path, message: str = "That path doesn't exist") -> Validator:
    """Accept a path answer verbatim if it exists under ``root``."""

    def _validate(answer: str) -> ValidationOutcome:
        if path_exists(root, answer):
            return Accepted(answer)
        return Rejected(message)

    return _validate


__all__ = [
    "Validator",
    "validate_confirmation",
    "choice_validator",
    "path_exists",
    "path_validator",
]
