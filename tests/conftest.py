from __future__ import annotations

from typing import Iterable

import pytest


class ScriptedIO:
    """Feeds canned input lines and captures everything written."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.writes: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        self.writes.append(prompt)
        if not self._lines:
            raise EOFError("end of input")
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.writes.append(text)

    @property
    def output(self) -> str:
        return "".join(self.writes)

    @property
    def reports(self) -> list[str]:
        return [w for w in self.writes if w.startswith("Vehicle: ")]


@pytest.fixture
def scripted_io():
    return ScriptedIO
