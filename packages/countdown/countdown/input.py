"""Duration text input."""
from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_seconds(text: str) -> int:
    """Parse a seconds field. Anything that is not an integer reads as 0."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return 0
    return max(int(text), 0)


class DurationInput:
    """Digits-only editing buffer for a seconds field."""

    def __init__(self, text: str = "", max_length: int = 5) -> None:
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        self._max_length = max_length
        self._text = ""
        for ch in text:
            self.type_char(ch)

    @property
    def text(self) -> str:
        return self._text

    @property
    def value(self) -> int:
        return parse_seconds(self._text)

    def type_char(self, ch: str) -> bool:
        """Append ``ch`` if it is a digit and there is room. Returns True if kept."""
        if len(ch) != 1 or not ch.isdigit() or not ch.isascii():
            return False
        if len(self._text) >= self._max_length:
            return False
        self._text += ch
        return True

    def backspace(self) -> None:
        self._text = self._text[:-1]

    def clear(self) -> None:
        self._text = ""
