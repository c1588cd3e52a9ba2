"""Answer sources for the question flow."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol

from loguru import logger
from rich.console import Console

from .questions import Question


class AnswerRejected(Exception):
    """Raised when a non-interactive answer fails validation."""

    def __init__(self, key: str, answer: str, reason: str) -> None:
        super().__init__(f"Answer '{answer}' for '{key}' was rejected: {reason}")
        self.key = key
        self.answer = answer
        self.reason = reason


class Prompter(Protocol):
    def ask(self, question: Question, prompt: str) -> str:
        """Return the raw answer; an empty string selects the default."""

    def reject(self, question: Question, answer: str, reason: str) -> None:
        """Report a rejected answer before the question is asked again."""


class ConsolePrompter:
    """Ask questions on the terminal through a rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def ask(self, question: Question, prompt: str) -> str:
        # Prompts contain bracketed defaults such as "[src]"; keep them out of markup parsing.
        return self.console.input(prompt, markup=False).strip()

    def reject(self, question: Question, answer: str, reason: str) -> None:
        self.console.print(f"[red]{reason}[/red]")


class ScriptedPrompter:
    """Answer questions from a mapping without user interaction.

    Keys missing from ``answers`` are answered with a blank, i.e. the
    question's default. A rejected answer cannot be corrected, so it raises
    :class:`AnswerRejected` instead of looping.
    """

    def __init__(self, answers: Optional[Mapping[str, Any]] = None, console: Optional[Console] = None) -> None:
        self.answers: Dict[str, Any] = dict(answers or {})
        self.console = console

    def ask(self, question: Question, prompt: str) -> str:
        value = self.answers.get(question.key)
        if value is None:
            answer = ""
        elif isinstance(value, bool):
            answer = "y" if value else "n"
        else:
            answer = str(value)
        logger.debug("Scripted answer for {}: {!r}", question.key, answer)
        if self.console is not None:
            self.console.print(f"{prompt}{answer}", markup=False, highlight=False)
        return answer

    def reject(self, question: Question, answer: str, reason: str) -> None:
        raise AnswerRejected(question.key, answer, reason)


__all__ = ["AnswerRejected", "Prompter", "ConsolePrompter", "ScriptedPrompter"]
