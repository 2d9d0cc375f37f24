"""User confirmation for uncertain speaker matches."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Confirmer(Protocol):
    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question and return True only for an affirmative answer."""


class StdinConfirmer:
    """Reads a single character answer from the terminal."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def confirm(self, prompt: str) -> bool:
        self.output_stream.write(prompt)
        self.output_stream.flush()
        answer = self.input_stream.read(1)
        return answer in ("y", "Y")


class AutoConfirmer:
    """Fixed answer for batch and non-interactive callers."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer
