"""Token kinds and tokens produced by the lexer and consumed by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kind of a lexical token."""

    EOFTOK = 0
    NONE = 1
    SEPARATOR = 2
    NUMBER = 3
    STRING = 4
    IDENT = 5
    LEFT_PAR = 6
    RIGHT_PAR = 7
    LEFT_BRACKET = 8
    RIGHT_BRACKET = 9
    LEFT_BRACE = 10
    RIGHT_BRACE = 11
    COMMA = 12
    DOT = 13
    COLON = 14
    PLUS = 15
    MINUS = 16
    MULT = 17
    DIV = 18
    EQUAL = 19
    LESS = 20
    GREATER = 21
    LEQUAL = 22
    GEQUAL = 23
    ARROW = 24


_TYPE_NAMES = {
    TokenType.EOFTOK: "End of File",
    TokenType.NONE: "None",
    TokenType.SEPARATOR: "Separator",
    TokenType.NUMBER: "Number",
    TokenType.STRING: "String",
    TokenType.IDENT: "Identifier",
    TokenType.LEFT_PAR: "Left Parenthesis",
    TokenType.RIGHT_PAR: "Right Parenthesis",
    TokenType.LEFT_BRACKET: "Left Bracket",
    TokenType.RIGHT_BRACKET: "Right Bracket",
    TokenType.LEFT_BRACE: "Left Brace",
    TokenType.RIGHT_BRACE: "Right Brace",
    TokenType.COMMA: "Comma",
    TokenType.DOT: "Dot",
    TokenType.COLON: "Colon",
    TokenType.PLUS: "Plus",
    TokenType.MINUS: "Minus",
    TokenType.MULT: "Multiply",
    TokenType.DIV: "Divide",
    TokenType.EQUAL: "Equal",
    TokenType.LESS: "Less",
    TokenType.GREATER: "Greater",
    TokenType.LEQUAL: "Less or equal",
    TokenType.GEQUAL: "Greater or equal",
    TokenType.ARROW: "Arrow",
}


def name_for_type(token_type: TokenType | int) -> str:
    """Return the human readable name of a token kind, or "Unknown"."""
    try:
        return _TYPE_NAMES[TokenType(token_type)]
    except ValueError:
        return "Unknown"


@dataclass
class SeparatorData:
    """Extra data of a separator token: how many separators it stands for."""

    count: int = 0


@dataclass
class Token:
    """A lexical token with its kind, line, text and optional extra data."""

    type: TokenType
    line: int
    value: str = ""
    additional_data: SeparatorData | None = None

    def name(self) -> str:
        """Return the human readable name of this token's kind."""
        return name_for_type(self.type)