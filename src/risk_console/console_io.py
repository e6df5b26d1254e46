from __future__ import annotations

import sys
from typing import Protocol, TextIO


class LineIO(Protocol):
    def read_line(self, prompt: str) -> str: ...

    def write(self, text: str) -> None: ...


class ConsoleIO:
    """Blocking line I/O over a pair of text streams (stdin/stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self, prompt: str) -> str:
        if prompt:
            self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")
