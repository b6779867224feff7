# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class ScriptedReader:
    """
    Deterministic LineReader for unit tests.

    - Returns the scripted lines in order
    - Raises EOFError once the script runs out (like a closed stdin)
    - Records prompts and close() calls for assertions
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.close_calls = 0

    @property
    def closed(self) -> bool:
        return self.close_calls > 0

    def readline(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def close(self) -> None:
        self.close_calls += 1


class InterruptingReader(ScriptedReader):
    """Raises KeyboardInterrupt after the scripted lines (Ctrl+C at a prompt)."""

    def readline(self, prompt: str = "") -> str:
        if not self._lines:
            self.prompts.append(prompt)
            raise KeyboardInterrupt
        return super().readline(prompt)
