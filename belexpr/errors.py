"""Errors raised while turning tokens into a program."""

from __future__ import annotations


class ParserError(Exception):
    """Raised when the parser meets input it cannot make sense of."""

    def __init__(self, function_name: str, message: str, line: int) -> None:
        super().__init__(function_name, message, line)
        self.function_name = function_name
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"Line {self.line} ({self.function_name}): {self.message}"