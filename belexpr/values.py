"""Basic expression values: panics, void, strings, symbols and references."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeVar


class ExprType(Enum):
    """Kind of an expression."""

    NUMBER = auto()
    STRING = auto()
    VOID = auto()
    SYMBOL = auto()
    PANIC = auto()
    REFERENCE = auto()
    OPERATOR = auto()
    ARRAY = auto()


class Expression(ABC):
    """An expression that can be evaluated in an environment."""

    @abstractmethod
    def eval(self, env: Mapping[str, Expression]) -> Expression:
        """Evaluate the expression and return the resulting value."""

    @abstractmethod
    def type(self) -> ExprType:
        """Return the kind of this expression."""


class Panic(Expression, Exception):
    """A runtime error of the language; it is both a value and an exception."""

    def __init__(self, name: str, message: str) -> None:
        Exception.__init__(self, name, message)
        self.name = name
        self.message = message

    def eval(self, env: Mapping[str, Expression]) -> Panic:
        return copy.copy(self)

    def type(self) -> ExprType:
        return ExprType.PANIC

    def __str__(self) -> str:
        return f"Panic: {self.message}"


class Void(Expression):
    """The empty value."""

    def eval(self, env: Mapping[str, Expression]) -> Void:
        return Void()

    def type(self) -> ExprType:
        return ExprType.VOID

    def __str__(self) -> str:
        return ""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Void)

    def __hash__(self) -> int:
        return hash(Void)


@dataclass(frozen=True)
class String(Expression):
    """A string value."""

    content: str

    def eval(self, env: Mapping[str, Expression]) -> String:
        return String(self.content)

    def type(self) -> ExprType:
        return ExprType.STRING

    def __str__(self) -> str:
        return self.content

    def __len__(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class Symbol(Expression):
    """A name that evaluates to the value bound to it in the environment."""

    name: str

    def eval(self, env: Mapping[str, Expression]) -> Expression:
        try:
            value = env[self.name]
        except KeyError:
            raise Panic("SYMBOL", f"Symbol '{self.name}' is not defined.") from None
        return copy.copy(value)

    def type(self) -> ExprType:
        return ExprType.SYMBOL

    def __str__(self) -> str:
        return self.name


_T = TypeVar("_T", bound=Expression)


class Reference(Expression):
    """A handle sharing one target expression with all its copies."""

    def __init__(self, target: Expression) -> None:
        self._target = target

    def eval(self, env: Mapping[str, Expression]) -> Reference:
        return Reference(self._target)

    def type(self) -> ExprType:
        return ExprType.REFERENCE

    def __str__(self) -> str:
        return "REFERENCE"

    def deref(self) -> Expression:
        """Return the shared target."""
        return self._target

    @staticmethod
    def cast(expr: Expression, cls: type[_T]) -> _T | None:
        """Return the target of a reference if it is a ``cls``, else None.

        Raises Panic if ``expr`` is not a reference at all.
        """
        if not isinstance(expr, Reference):
            raise Panic("REFERENCE", "Expression is not a reference.")
        target = expr._target
        return target if isinstance(target, cls) else None