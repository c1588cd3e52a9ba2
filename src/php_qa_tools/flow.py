"""Question flow driver."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from loguru import logger

from .models import Accepted
from .prompts import Prompter
from .questions import CONTINUE_QUESTION, Question
from .settings import SettingsStore


class SetupAborted(Exception):
    """Raised when the user declines to continue with the setup."""

    def __init__(self) -> None:
        super().__init__("Setup aborted by user")


class QuestionFlow:
    """Run questions in order, each gated by its precondition.

    Every step receives the store produced by the previous step and returns
    the updated store. A rejected answer re-asks the same question with the
    same prompt and default; only declining ``gate`` ends the flow early.
    """

    def __init__(
        self,
        questions: Iterable[Question],
        prompter: Prompter,
        *,
        gate: Optional[Question] = CONTINUE_QUESTION,
    ) -> None:
        self.questions: List[Question] = list(questions)
        self.prompter = prompter
        self.gate = gate

    def run(self, store: Optional[SettingsStore] = None) -> SettingsStore:
        store = store if store is not None else SettingsStore.with_defaults()
        if self.gate is not None and not self.resolve(self.gate, store):
            logger.debug("User declined to continue")
            raise SetupAborted()

        for question in self.questions:
            store = self.step(question, store)
        return store

    def step(self, question: Question, store: SettingsStore) -> SettingsStore:
        if not question.applies(store):
            logger.debug("Skipping {}: precondition not met", question.key)
            return store
        value = self.resolve(question, store)
        logger.debug("{} = {!r}", question.key, value)
        return store.set(question.key, value)

    def resolve(self, question: Question, store: SettingsStore) -> Any:
        """Ask ``question`` until its validator accepts the answer."""

        prompt = question.prompt(store)
        default = question.default_answer(store)
        while True:
            answer = self.prompter.ask(question, prompt) or default
            outcome = question.validate(answer)
            if isinstance(outcome, Accepted):
                return outcome.value
            logger.debug("Rejected {!r} for {}: {}", answer, question.key, outcome.reason)
            self.prompter.reject(question, answer, outcome.reason)


__all__ = ["QuestionFlow", "SetupAborted"]
