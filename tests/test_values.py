import pytest

from belexpr.values import (
    Expression,
    ExprType,
    Panic,
    Reference,
    String,
    Symbol,
    Void,
)


def test_expression_is_abstract():
    with pytest.raises(TypeError):
        Expression()


def test_panic_str_and_fields():
    panic = Panic("DIVISION", "Division by 0.")
    assert str(panic) == "Panic: Division by 0."
    assert panic.name == "DIVISION"
    assert panic.message == "Division by 0."
    assert panic.type() is ExprType.PANIC


def test_panic_str_for_other_message():
    panic = Panic("NUMBER", "Decimal numbers with rational part are not supported.")
    assert str(panic) == "Panic: Decimal numbers with rational part are not supported."
    assert panic.name == "NUMBER"
    assert panic.type() is ExprType.PANIC


def test_panic_eval_returns_equal_copy():
    panic = Panic("PROCCALL", "Symbol 'x' is not an array or procedure.")
    result = panic.eval({})
    assert result is not panic
    assert (result.name, result.message) == (panic.name, panic.message)


def test_void():
    void = Void()
    assert str(void) == ""
    assert void.type() is ExprType.VOID
    assert void.eval({}) == Void()


def test_string():
    text = String("Hallo Welt!")
    assert str(text) == "Hallo Welt!"
    assert len(text) == len("Hallo Welt!")
    assert text.type() is ExprType.STRING
    assert text.eval({}) == text


def test_empty_string_length():
    assert len(String("")) == 0


def test_symbol_str_and_type():
    symbol = Symbol("num1")
    assert str(symbol) == "num1"
    assert symbol.type() is ExprType.SYMBOL


def test_symbol_eval_looks_up_environment():
    env = {"greeting": String("Hallo Welt!")}
    assert Symbol("greeting").eval(env) == String("Hallo Welt!")


def test_symbol_eval_missing_raises_panic():
    with pytest.raises(Panic):
        Symbol("test").eval({})


def test_reference_shares_target():
    target = String("shared")
    ref = Reference(target)
    copy_ref = ref.eval({})
    assert copy_ref is not ref
    assert copy_ref.deref() is target
    assert ref.deref() is target


def test_reference_str_and_type():
    ref = Reference(Void())
    assert str(ref) == "REFERENCE"
    assert ref.type() is ExprType.REFERENCE


def test_reference_via_symbol_keeps_target():
    target = String("data")
    env = {"arr": Reference(target)}
    assert Symbol("arr").eval(env).deref() is target


def test_cast_returns_target_of_matching_class():
    target = String("x")
    assert Reference.cast(Reference(target), String) is target


def test_cast_returns_none_for_other_class():
    assert Reference.cast(Reference(String("x")), Symbol) is None


def test_cast_of_non_reference_panics():
    with pytest.raises(Panic) as info:
        Reference.cast(String("x"), String)
    assert info.value.name == "REFERENCE"
    assert info.value.message == "Expression is not a reference."