from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest
from php_qa_tools.questions import Question


class RecordingPrompter:
    """Feeds answers in order and records every prompt and rejection."""

    def __init__(self, answers: List[str]) -> None:
        self.answers = list(answers)
        self.prompts: List[Tuple[str, str]] = []
        self.rejections: List[Tuple[str, str]] = []

    def ask(self, question: Question, prompt: str) -> str:
        self.prompts.append((question.key, prompt))
        if not self.answers:
            raise AssertionError(f"Unexpected question: {prompt}")
        return self.answers.pop(0)

    def reject(self, question: Question, answer: str, reason: str) -> None:
        self.rejections.append((question.key, reason))

    @property
    def asked(self) -> List[str]:
        return [key for key, _ in self.prompts]


def create_php_project(root: Path) -> Path:
    (root / "src").mkdir()
    (root / "tests").mkdir()
    (root / "vendor").mkdir()
    (root / "vendor" / "autoload.php").write_text("<?php\n")
    (root / "build" / "artifacts").mkdir(parents=True)
    return root


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    return create_php_project(tmp_path)


@pytest.fixture()
def prompter_factory():
    def _factory(*answers: str) -> RecordingPrompter:
        return RecordingPrompter(list(answers))

    return _factory
