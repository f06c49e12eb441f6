# belexpr

Building blocks for a small interpreted language: expression values,
exact rational numbers, a few operator expressions, lexer tokens and a
parser error type.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `belexpr.tokens`: `TokenType` (the token kinds), `Token` (kind, line,
  text and optional `SeparatorData`, which counts how many separators a
  token stands for) and `name_for_type`, which gives the readable name of
  a token kind, or `"Unknown"` for a value that is not a kind.
- `belexpr.errors`: `ParserError`, carrying the function name, message and
  line; its text reads `Line <n> (<function>): <message>`.
- `belexpr.values`: the abstract `Expression` base with `eval(env)` and
  `type()`, and the values `Void`, `String`, `Symbol` and `Reference`,
  plus `Panic`, the runtime error of the language, which is both an
  expression and an exception. `ExprType` names the kind of every
  expression. A `Symbol` evaluates to a copy of the value bound to its
  name in the environment (any mapping of names to expressions) and
  raises `Panic` if the name is unbound. `Reference.cast(expr, cls)`
  returns the target of a reference if it is a `cls`, `None` otherwise,
  and raises `Panic` if `expr` is not a reference.
- `belexpr.number`: `Number`, an exact fraction of two integers, always
  reduced, with `+ - * /` and comparison operators. `Number.parse` reads
  `"42"`, `"3/4"` and `"3.14"`; a text with both a dot and a slash, and
  division by zero, raise `Panic`. `numerator()` and `denominator()`
  return whole `Number`s. The module also holds the constants `ZERO`,
  `ONE` and `MINUS_ONE`.
- `belexpr.operators`: `Multiplication` and `Subtraction` of two numeric
  expressions, `Sequence`, which evaluates its expressions in order and
  gives the last value (`Void` when empty), and `ProcCall`, which looks a
  name up in the environment and either indexes an array held by a
  `Reference` (the target must offer `get(indices)`) or calls the target's
  `apply(arguments, env)`.

## Example

```python
from belexpr.number import Number
from belexpr.operators import Multiplication, Sequence
from belexpr.values import String, Symbol

a = Number.parse("100/3")
b = Number(3, 1)

print(a + b)   # 109/3
print(a / b)   # 100/9
print(a > b)   # True

product = Multiplication(a, b)
print(product.eval({}))   # 100

env = {"greeting": String("Hallo Welt!")}
print(Sequence(product, Symbol("greeting")).eval(env))   # Hallo Welt!
```

An operand of the wrong kind, such as multiplying a `String`, raises
`Panic` with the name of the failing operation and a message.

## What this package does not do

It has no lexer that turns source text into `Token`s, no parser that
builds expressions from them (`ParserError` is provided for one), and no
command for running programs. Among operators only multiplication,
subtraction, sequences and calls are present; there is no addition or
division expression, no declarations, assignments, conditionals, arrays
or built-in procedures. Programs are built by constructing expressions
directly and calling `eval` with a mapping of names to values.