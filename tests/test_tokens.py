import copy

import pytest

from belexpr.tokens import SeparatorData, Token, TokenType, name_for_type


@pytest.mark.parametrize(
    "token_type, expected",
    [
        (TokenType.EOFTOK, "End of File"),
        (TokenType.IDENT, "Identifier"),
        (TokenType.LEFT_PAR, "Left Parenthesis"),
        (TokenType.MULT, "Multiply"),
        (TokenType.GEQUAL, "Greater or equal"),
        (TokenType.ARROW, "Arrow"),
    ],
)
def test_name_for_type(token_type, expected):
    assert name_for_type(token_type) == expected


def test_name_for_unknown_value():
    assert name_for_type(999) == "Unknown"


def test_name_for_plain_int_matches_enum():
    assert name_for_type(int(TokenType.COMMA)) == name_for_type(TokenType.COMMA)


def test_every_type_has_a_distinct_known_name():
    names = [name_for_type(token_type) for token_type in TokenType]
    assert "Unknown" not in names
    assert len(set(names)) == len(TokenType)


def test_eoftok_is_zero():
    assert TokenType.EOFTOK == 0
    assert TokenType(0) is TokenType.EOFTOK


def test_token_defaults_and_name():
    token = Token(TokenType.STRING, 4)
    assert token.value == ""
    assert token.additional_data is None
    assert token.line == 4
    assert token.name() == "String"


def test_token_name_follows_type():
    token = Token(TokenType.NUMBER, 1, "3.14")
    assert token.name() == name_for_type(TokenType.NUMBER)
    assert token.value == "3.14"


def test_separator_data_count_updates():
    data = SeparatorData(0)
    data.count += 1
    data.count += 1
    assert data.count == 2


def test_copy_of_token_has_own_additional_data():
    token = Token(TokenType.SEPARATOR, 2, "\n", SeparatorData(1))
    duplicate = copy.deepcopy(token)
    duplicate.additional_data.count = 5
    assert token.additional_data.count == 1
    assert duplicate == Token(TokenType.SEPARATOR, 2, "\n", SeparatorData(5))