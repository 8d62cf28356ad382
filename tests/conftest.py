from typing import List

import pytest

from detective_quest.config import SUSPECT_ASSOCIATIONS
from detective_quest.mansion import build_mansion
from detective_quest.suspect_index import SuspectIndex


class RecordingSink:
    """Output collaborator that keeps every line written to it."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptedPrompt:
    """Input collaborator that replays fixed answers, then raises EOFError."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def mansion():
    return build_mansion()


@pytest.fixture
def suspect_index():
    return SuspectIndex.build(SUSPECT_ASSOCIATIONS)
