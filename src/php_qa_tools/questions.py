"""Question descriptors and the ordered question list for the wizard."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Tuple

from . import settings as s
from .models import QuestionKind, ValidationOutcome
from .settings import SettingsStore
from .validators import Validator, choice_validator, path_validator, validate_confirmation

Precondition = Callable[[SettingsStore], bool]

FIXER_LEVELS = ("psr0", "psr1", "psr2", "all")
CODING_STANDARDS = ("PEAR", "PHPCS", "PSR1", "PSR2", "Squiz", "Zend")

# Tools that scan the PHP source directory.
SOURCE_TOOLS = (
    s.ENABLE_PHP_CS_FIXER,
    s.ENABLE_PHP_MESS_DETECTOR,
    s.ENABLE_PHP_CODE_SNIFFER,
    s.ENABLE_PHP_COPY_PASTE_DETECTION,
)


def always(store: SettingsStore) -> bool:
    return True


def enabled(*names: str) -> Precondition:
    """Precondition that holds when any of ``names`` is truthy in the store."""

    def _check(store: SettingsStore) -> bool:
        return store.any_enabled(*names)

    return _check


@dataclass(slots=True, frozen=True)
class Question:
    """A single prompt step.

    ``default`` is either a literal or a callable of the current store, so a
    question can offer a previously seeded value as its suggestion.
    """

    key: str
    text: str
    kind: QuestionKind
    default: Any
    validator: Validator
    precondition: Precondition = always
    choices: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.choices and not callable(self.default) and self.default not in self.choices:
            raise ValueError(
                f"Default '{self.default}' for '{self.key}' is not one of: {', '.join(self.choices)}"
            )

    def applies(self, store: SettingsStore) -> bool:
        return self.precondition(store)

    def resolve_default(self, store: SettingsStore) -> Any:
        return self.default(store) if callable(self.default) else self.default

    def default_answer(self, store: SettingsStore) -> str:
        """Answer text used when the user presses through."""

        default = self.resolve_default(store)
        if self.kind is QuestionKind.CONFIRM:
            return "y" if default else "n"
        return str(default)

    def prompt(self, store: SettingsStore) -> str:
        default = self.resolve_default(store)
        if self.kind is QuestionKind.CONFIRM:
            hint = "Y/n" if default else "y/N"
            return f"{self.text} [{hint}] "
        if self.choices:
            return f"{self.text} ({', '.join(self.choices)}) [{default}] "
        return f"{self.text} [{default}] "

    def validate(self, answer: str) -> ValidationOutcome:
        return self.validator(answer)


def confirm(key: str, text: str, *, default: bool = True, precondition: Precondition = always) -> Question:
    return Question(
        key=key,
        text=text,
        kind=QuestionKind.CONFIRM,
        default=default,
        validator=validate_confirmation,
        precondition=precondition,
    )


def choose(
    key: str,
    text: str,
    choices: Tuple[str, ...],
    *,
    default: str,
    message: str,
    precondition: Precondition = always,
) -> Question:
    return Question(
        key=key,
        text=text,
        kind=QuestionKind.TEXT,
        default=default,
        validator=choice_validator(choices, message),
        precondition=precondition,
        choices=choices,
    )


def ask_path(
    key: str,
    text: str,
    root: Path,
    *,
    default: Any,
    precondition: Precondition = always,
) -> Question:
    return Question(
        key=key,
        text=text,
        kind=QuestionKind.TEXT,
        default=default,
        validator=path_validator(root),
        precondition=precondition,
    )


CONTINUE_KEY = "continue"

CONTINUE_QUESTION = confirm(CONTINUE_KEY, "Do you want to continue?")


def _current_artifacts_path(store: SettingsStore) -> str:
    return store.get(s.BUILD_ARTIFACTS_PATH) or s.DEFAULT_BUILD_ARTIFACTS_PATH


def build_questions(project_root: Path) -> List[Question]:
    """Return the wizard questions in the order they are asked.

    Path answers are checked for existence relative to ``project_root``.
    """

    return [
        confirm(s.ENABLE_PHP_LINT, "Do you want to enable PHP Lint?"),
        confirm(s.ENABLE_PHP_CS_FIXER, "Do you want to enable the PHP CS Fixer?"),
        choose(
            s.PHP_CS_FIXER_LEVEL,
            "What fixer level do you want to use?",
            FIXER_LEVELS,
            default="all",
            message="That fixer level is not supported",
            precondition=enabled(s.ENABLE_PHP_CS_FIXER),
        ),
        confirm(s.ENABLE_PHP_MESS_DETECTOR, "Do you want to enable the PHP Mess Detector?"),
        confirm(s.ENABLE_PHP_CODE_SNIFFER, "Do you want to enable the PHP Code Sniffer?"),
        choose(
            s.PHP_CODE_SNIFFER_CODING_STYLE,
            "Which coding standard do you want to use?",
            CODING_STANDARDS,
            default="PSR2",
            message="That coding style is not supported",
            precondition=enabled(s.ENABLE_PHP_CODE_SNIFFER),
        ),
        confirm(s.ENABLE_PHP_COPY_PASTE_DETECTION, "Do you want to enable PHP Copy Paste Detection?"),
        confirm(s.ENABLE_PHP_SECURITY_CHECKER, "Do you want to enable the Sensiolabs Security Checker?"),
        ask_path(
            s.PHP_SRC_PATH,
            "What is the path to the PHP source code?",
            project_root,
            default="src",
            precondition=enabled(*SOURCE_TOOLS),
        ),
        confirm(s.ENABLE_PHP_UNIT, "Do you want to enable PHPUnit tests?"),
        ask_path(
            s.PHP_TESTS_PATH,
            "What is the path to the PHPUnit tests?",
            project_root,
            default="tests",
            precondition=enabled(s.ENABLE_PHP_UNIT),
        ),
        confirm(
            s.ENABLE_PHP_UNIT_AUTOLOAD,
            "Do you want to enable an autoload script for PHPUnit?",
            precondition=enabled(s.ENABLE_PHP_UNIT),
        ),
        ask_path(
            s.PHP_TESTS_AUTOLOAD_PATH,
            "What is the path to the autoload script for PHPUnit?",
            project_root,
            default="vendor/autoload.php",
            precondition=_autoload_enabled,
        ),
        ask_path(
            s.BUILD_ARTIFACTS_PATH,
            "Where do you want to store the build artifacts?",
            project_root,
            default=_current_artifacts_path,
        ),
    ]


def _autoload_enabled(store: SettingsStore) -> bool:
    return bool(store.get(s.ENABLE_PHP_UNIT)) and bool(store.get(s.ENABLE_PHP_UNIT_AUTOLOAD))


__all__ = [
    "Question",
    "CONTINUE_KEY",
    "CONTINUE_QUESTION",
    "FIXER_LEVELS",
    "CODING_STANDARDS",
    "SOURCE_TOOLS",
    "build_questions",
    "enabled",
]
