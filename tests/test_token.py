import pytest

from minicc.token import (
    Token,
    TokenType,
    format_token,
    print_token,
    print_tokens,
    token_type_name,
)


def test_values_are_consecutive_from_zero():
    names = [token_type_name(number) for number in range(len(TokenType))]
    assert names == [member.name for member in TokenType]


def test_first_and_last_members():
    assert token_type_name(0) == "PLUS"
    assert token_type_name(len(TokenType) - 1) == "EOF_TOKEN"


def test_separators_follow_operators():
    assert token_type_name(int(TokenType.BANG) + 1) == "LEFT_PAREN"
    assert token_type_name(int(TokenType.COLON) + 1) == "NUMBER"
    assert token_type_name(int(TokenType.IDENTIFIER) + 1) == "AUTO"


@pytest.mark.parametrize("member", list(TokenType))
def test_name_matches_member(member):
    assert token_type_name(member) == member.name


def test_name_of_underscore_keywords():
    assert token_type_name(TokenType._BOOL) == "_BOOL"
    assert token_type_name(TokenType._COMPLEX) == "_COMPLEX"
    assert token_type_name(TokenType._IMAGINARY) == "_IMAGINARY"


def test_name_accepts_plain_int():
    assert token_type_name(int(TokenType.SEMICOLON)) == "SEMICOLON"


@pytest.mark.parametrize("bad", [-1, len(TokenType), 1000])
def test_unknown_name(bad):
    assert token_type_name(bad) == "UNKNOWN"


def test_token_fields():
    token = Token(TokenType.IDENTIFIER, "x", 3)
    assert token.type is TokenType.IDENTIFIER
    assert token.value == "x"
    assert token.line == 3


def test_tokens_compare_by_value():
    assert Token(TokenType.NUMBER, "1", 1) == Token(TokenType.NUMBER, "1", 1)
    assert Token(TokenType.NUMBER, "1", 1) != Token(TokenType.NUMBER, "1", 2)


def test_token_is_immutable():
    token = Token(TokenType.PLUS, "+", 1)
    with pytest.raises(AttributeError):
        token.value = "-"
    assert token.value == "+"
    assert token.type is TokenType.PLUS


def test_format_contains_parts():
    text = format_token(Token(TokenType.PLUS, "+", 7))
    assert "PLUS" in text
    assert "+" in text
    assert "7" in text


def test_format_empty_value_uses_placeholder():
    text = format_token(Token(TokenType.EOF_TOKEN, "", 2))
    assert "N/A" in text
    assert "EOF_TOKEN" in text


def test_str_matches_format():
    token = Token(TokenType.INT, "int", 1)
    assert str(token) == format_token(token)


def test_print_token(capsys):
    token = Token(TokenType.MINUS, "-", 4)
    print_token(token)
    assert capsys.readouterr().out == format_token(token) + "\n"


def test_print_tokens_one_line_each(capsys):
    tokens = [
        Token(TokenType.IDENTIFIER, "a", 1),
        Token(TokenType.SEMICOLON, ";", 1),
        Token(TokenType.EOF_TOKEN, "", 1),
    ]
    print_tokens(tokens)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [format_token(t) for t in tokens]