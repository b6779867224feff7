# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the menu loop.

The loop depends on Protocols instead of concrete console classes.
This keeps stdin swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

Emitter = Callable[[str], None]
# Writes one user-visible line (print by default).


class LineReader(Protocol):
    """
    Line-oriented input resource.

    readline() shows `prompt`, blocks for one line and returns it without the
    trailing newline. It raises EOFError once the input is exhausted.
    close() releases the resource and must be safe to call twice.
    """

    def readline(self, prompt: str = "") -> str: ...

    def close(self) -> None: ...
