"""Operator expressions: arithmetic, sequences and procedure calls."""

from __future__ import annotations

import copy
import re
from collections.abc import Iterable, Mapping

from belexpr.number import Number
from belexpr.values import Expression, ExprType, Panic, Reference, Void

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _numeric_operands(
    first: Expression, second: Expression, env: Mapping[str, Expression], name: str, verb: str
) -> tuple[Number, Number]:
    left = first.eval(env)
    right = second.eval(env)
    if not isinstance(left, Number) or not isinstance(right, Number):
        raise Panic(
            name,
            f"Cannot apply {verb} to operands, because one of them is not a number.",
        )
    return left, right


class Multiplication(Expression):
    """The product of two numeric expressions."""

    def __init__(self, first: Expression, second: Expression) -> None:
        self.first = first
        self.second = second

    def eval(self, env: Mapping[str, Expression]) -> Number:
        left, right = _numeric_operands(
            self.first, self.second, env, "MULTIPLICATION", "multiplication"
        )
        return left * right

    def type(self) -> ExprType:
        return ExprType.OPERATOR

    def __str__(self) -> str:
        return "Op(Multiplication)"


class Subtraction(Expression):
    """The difference of two numeric expressions."""

    def __init__(self, first: Expression, second: Expression) -> None:
        self.first = first
        self.second = second

    def eval(self, env: Mapping[str, Expression]) -> Number:
        left, right = _numeric_operands(
            self.first, self.second, env, "SUBTRACTION", "subtraction"
        )
        return left - right

    def type(self) -> ExprType:
        return ExprType.OPERATOR

    def __str__(self) -> str:
        return "Op(Subtraction)"


class Sequence(Expression):
    """Expressions evaluated in order; the value is that of the last one."""

    def __init__(self, *args: Expression) -> None:
        self.expressions: list[Expression] = list(args)

    def add(self, expr: Expression) -> None:
        """Append an expression to the sequence."""
        self.expressions.append(expr)

    def eval(self, env: Mapping[str, Expression]) -> Expression:
        result: Expression = Void()
        for expr in self.expressions:
            result = expr.eval(env)
        return result

    def type(self) -> ExprType:
        return ExprType.OPERATOR

    def __str__(self) -> str:
        return "Op(Sequence)"


def _index_of(number: Number) -> int:
    match = _LEADING_INT.match(str(number))
    return int(match.group(1)) if match else 0


class ProcCall(Expression):
    """A call of a procedure, or an element lookup in an array, by name."""

    def __init__(self, name: str, arguments: Iterable[Expression]) -> None:
        self.name = name
        self.arguments: list[Expression] = list(arguments)

    def eval(self, env: Mapping[str, Expression]) -> Expression:
        try:
            target = env[self.name]
        except KeyError:
            raise Panic("PROCCALL", f"Symbol '{self.name}' is not defined.") from None

        if target.type() is ExprType.ARRAY:
            array = Reference.cast(target, Expression)
            indices = []
            for argument in self.arguments:
                value = argument.eval(env)
                if not isinstance(value, Number):
                    raise Panic(
                        "PROCEDURE",
                        "At least one argument of the array does not contain a number.",
                    )
                indices.append(_index_of(value))
            return copy.copy(array.get(indices))

        apply = getattr(target, "apply", None)
        if not callable(apply):
            raise Panic(
                "PROCCALL", f"Symbol '{self.name}' is not an array or procedure."
            )
        return apply(self.arguments, env)

    def type(self) -> ExprType:
        return ExprType.OPERATOR

    def __str__(self) -> str:
        return "Op(ProcCall)"