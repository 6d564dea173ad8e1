"""
Diagnostic trace of the grammar rules in progress.

Each production pushes a frame when it starts and pops it when it finishes.
When an error escapes, the frames of every unfinished rule are still on the
stack, so rendering them innermost-first explains how the parser got to the
offending token.
"""

from dataclasses import dataclass
from typing import TextIO

SEPARATOR = "-" * 206 + ">"


@dataclass(frozen=True)
class Frame:
    rule: str
    line: int


class DiagnosticTrace:
    """Stack of `Frame`s mirroring the parser's call chain."""

    def __init__(self) -> None:
        self.frames: list[Frame] = []

    def push(self, rule: str, line: int) -> None:
        self.frames.append(Frame(rule, line))

    def pop(self) -> Frame:
        return self.frames.pop()

    def clear(self) -> None:
        self.frames.clear()

    def render(self) -> list[str]:
        """Returns one `Caused by` line per frame, innermost first, then the separator."""
        lines = [
            f">\tCaused by {frame.rule} on line {frame.line}"
            for frame in reversed(self.frames)
        ]
        lines.append(SEPARATOR)
        return lines

    def dump(self, stream: TextIO) -> None:
        for line in self.render():
            print(line, file=stream)
