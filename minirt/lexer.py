"""Low-level scanning of scene file fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from minirt.scene import Color, SceneError


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9" and len(c) == 1


@dataclass
class Cursor:
    """A position within a line of scene text."""

    text: str
    pos: int = 0

    def peek(self) -> str:
        """The current character, or an empty string at the end."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self, n: int = 1) -> None:
        """Move forward n characters, stopping at the end of the text."""
        self.pos = min(self.pos + n, len(self.text))

    def skip_spaces(self) -> None:
        while self.peek() in (" ", "\t") and self.peek():
            self.advance()

    def _digits(self):
        while _is_digit(self.peek()):
            digit = ord(self.peek()) - ord("0")
            self.advance()
            yield digit

    def parse_int(self) -> int:
        """Read an optional '-' followed by decimal digits."""
        sign = 1
        if self.peek() == "-":
            sign = -1
            self.advance()
        num = 0
        for digit in self._digits():
            num = num * 10 + digit
        return num * sign

    def parse_float(self) -> float:
        """Read an optional '-', digits, and an optional fraction."""
        sign = 1.0
        if self.peek() == "-":
            sign = -1.0
            self.advance()
        result = 0.0
        for digit in self._digits():
            result = result * 10.0 + digit
        if self.peek() == ".":
            self.advance()
            factor = 1.0
            for digit in self._digits():
                factor *= 0.1
                result += digit * factor
        return result * sign

    def parse_color(self) -> Color:
        """Read three comma-separated channels, each within [0, 255]."""
        channels = []
        for index, name in enumerate("RGB"):
            if index:
                self.advance()
            value = self.parse_int()
            if not 0 <= value <= 255:
                raise SceneError(f"Color {name} out of range [0, 255]")
            channels.append(value)
        return Color(*channels)


def split_fields(text: str, sep: str) -> List[str]:
    """Split on sep, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def _unsigned(text: str) -> str:
    return text[1:] if text[:1] in ("-", "+") else text


def is_float(text: str) -> bool:
    """True for an optionally signed run of digits with at most one '.'."""
    body = _unsigned(text)
    if not body:
        return False
    if body.count(".") > 1:
        return False
    return all(_is_digit(c) or c == "." for c in body)


def is_int(text: str) -> bool:
    """True for an optionally signed, non-empty run of digits."""
    body = _unsigned(text)
    return bool(body) and all(_is_digit(c) for c in body)