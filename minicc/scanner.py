"""Lexical analysis of a small C subset into a list of tokens."""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterator

from minicc.token import Token, TokenType

_log = logging.getLogger(__name__)

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    ";": TokenType.SEMICOLON,
}

# Characters that form a two-character operator when followed by '='.
_WITH_EQUALS = {
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    "=": (TokenType.EQUAL, TokenType.ASSIGNMENT),
    "!": (TokenType.NOT_EQUAL, TokenType.BANG),
}

_WHITESPACE = frozenset(" \r\t")

KEYWORDS = {
    "auto": TokenType.AUTO,
    "break": TokenType.BREAK,
    "case": TokenType.CASE,
    "char": TokenType.CHAR,
    "const": TokenType.CONST,
    "continue": TokenType.CONTINUE,
    "default": TokenType.DEFAULT,
    "do": TokenType.DO,
    "double": TokenType.DOUBLE,
    "else": TokenType.ELSE,
    "enum": TokenType.ENUM,
    "extern": TokenType.EXTERN,
    "float": TokenType.FLOAT,
    "for": TokenType.FOR,
    "goto": TokenType.GOTO,
    "if": TokenType.IF,
    "inline": TokenType.INLINE,
    "int": TokenType.INT,
    "long": TokenType.LONG,
    "register": TokenType.REGISTER,
    "restrict": TokenType.RESTRICT,
    "return": TokenType.RETURN,
    "short": TokenType.SHORT,
    "signed": TokenType.SIGNED,
    "sizeof": TokenType.SIZEOF,
    "static": TokenType.STATIC,
    "struct": TokenType.STRUCT,
    "switch": TokenType.SWITCH,
    "typedef": TokenType.TYPEDEF,
    "union": TokenType.UNION,
    "unsigned": TokenType.UNSIGNED,
    "void": TokenType.VOID,
    "volatile": TokenType.VOLATILE,
    "while": TokenType.WHILE,
    "_Bool": TokenType._BOOL,
    "_Complex": TokenType._COMPLEX,
    "_Imaginary": TokenType._IMAGINARY,
}


def _is_digit(c: str) -> bool:
    return bool(c) and unicodedata.category(c) == "Nd"


def _is_letter(c: str) -> bool:
    return bool(c) and unicodedata.category(c).startswith("L")


def _is_word_char(c: str) -> bool:
    return bool(c) and (c == "_" or unicodedata.category(c)[0] in "LN")


class Scanner:
    """Turns source text into tokens, ending with an EOF token.

    Unexpected characters and unterminated comments are reported as
    warnings on this module's logger and scanning carries on.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return its tokens."""
        self._start = 0
        self._current = 0
        self._line = 1
        return list(self._iter_tokens())

    def _iter_tokens(self) -> Iterator[Token]:
        while not self._at_end():
            self._start = self._current
            token = self._scan_token()
            if token is not None:
                yield token
        yield Token(TokenType.EOF_TOKEN, "", self._line)

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        c = self._source[self._current]
        self._current += 1
        return c

    def _peek(self) -> str:
        return "" if self._at_end() else self._source[self._current]

    def _peek_next(self) -> str:
        nxt = self._current + 1
        return "" if nxt >= len(self._source) else self._source[nxt]

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    def _make(self, token_type: TokenType) -> Token:
        text = self._source[self._start:self._current]
        return Token(token_type, text, self._line)

    def _scan_token(self) -> Token | None:
        c = self._advance()

        if c in _SINGLE_CHAR:
            return self._make(_SINGLE_CHAR[c])
        if c == "/":
            if self._consume_comment():
                return None
            return self._make(TokenType.DIVIDE)
        if c in _WITH_EQUALS:
            with_eq, without = _WITH_EQUALS[c]
            return self._make(with_eq if self._match("=") else without)
        if c in _WHITESPACE:
            return None
        if c == "\n":
            self._line += 1
            return None
        if _is_digit(c):
            return self._number()
        if _is_letter(c) or c == "_":
            return self._identifier()

        _log.warning("Unexpected character '%s' at line %d", c, self._line)
        return None

    def _identifier(self) -> Token:
        while _is_word_char(self._peek()):
            self._advance()
        text = self._source[self._start:self._current]
        return self._make(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self) -> Token:
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        return self._make(TokenType.NUMBER)

    def _consume_comment(self) -> bool:
        """Skip a comment that starts after a '/', if there is one."""
        if self._peek() == "/":
            while self._peek() != "\n" and not self._at_end():
                self._advance()
            return True

        if self._peek() == "*":
            # The opening consumes the '*' and the character after it.
            for _ in range(2):
                if not self._at_end():
                    self._advance()

            while not self._at_end():
                c = self._advance()
                if c == "*" and self._peek() == "/":
                    self._advance()
                    return True
                if c == "\n":
                    self._line += 1

            _log.warning("Unterminated multi-line comment at line %d", self._line)
            return True

        return False


def scan_tokens(source: str) -> list[Token]:
    """Scan ``source`` and return its tokens."""
    return Scanner(source).scan_tokens()