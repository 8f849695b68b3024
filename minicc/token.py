"""Token kinds and the token record produced by the scanner."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Every kind of token the scanner can produce, numbered from zero."""

    # Operators
    PLUS = 0
    MINUS = 1
    MULTIPLY = 2
    DIVIDE = 3
    EQUAL = 4
    NOT_EQUAL = 5
    LESS = 6
    GREATER = 7
    LESS_EQUAL = 8
    GREATER_EQUAL = 9
    ASSIGNMENT = 10
    BANG = 11

    # Separators
    LEFT_PAREN = 12
    RIGHT_PAREN = 13
    SEMICOLON = 14
    LEFT_BRACE = 15
    RIGHT_BRACE = 16
    COMMA = 17
    DOT = 18
    COLON = 19

    # Literals
    NUMBER = 20
    IDENTIFIER = 21

    # C99 keywords
    AUTO = 22
    BREAK = 23
    CASE = 24
    CHAR = 25
    CONST = 26
    CONTINUE = 27
    DEFAULT = 28
    DO = 29
    DOUBLE = 30
    ELSE = 31
    ENUM = 32
    EXTERN = 33
    FLOAT = 34
    FOR = 35
    GOTO = 36
    IF = 37
    INLINE = 38
    INT = 39
    LONG = 40
    REGISTER = 41
    RESTRICT = 42
    RETURN = 43
    SHORT = 44
    SIGNED = 45
    SIZEOF = 46
    STATIC = 47
    STRUCT = 48
    SWITCH = 49
    TYPEDEF = 50
    UNION = 51
    UNSIGNED = 52
    VOID = 53
    VOLATILE = 54
    WHILE = 55
    _BOOL = 56
    _COMPLEX = 57
    _IMAGINARY = 58

    # Comments
    SINGLE_LINE_COMMENT = 59
    MULTI_LINE_COMMENT = 60

    EOF_TOKEN = 61


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind and the line it was found on."""

    type: TokenType
    value: str
    line: int

    def __str__(self) -> str:
        return format_token(self)


def token_type_name(token_type: TokenType | int) -> str:
    """Return the symbolic name of a token kind, or "UNKNOWN"."""
    try:
        return TokenType(token_type).name
    except ValueError:
        return "UNKNOWN"


def format_token(token: Token) -> str:
    """Describe a token as one line of text."""
    value = token.value or "N/A"
    return (
        f"Token Type: {token_type_name(token.type)}, "
        f"Value: {value}, Line: {token.line}"
    )


def print_token(token: Token) -> None:
    """Write a token's description to standard output."""
    print(format_token(token), file=sys.stdout)


def print_tokens(tokens: Iterable[Token]) -> None:
    """Write every token's description, one per line."""
    for token in tokens:
        print_token(token)