"""Recursive-descent syntax checking of a small C subset."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from minicc.token import Token, TokenType, token_type_name

_log = logging.getLogger(__name__)

_TYPE_KEYWORDS = (TokenType.INT, TokenType.FLOAT, TokenType.CHAR)

# Token kinds at which error recovery resumes parsing.
_STATEMENT_STARTS = frozenset(
    {
        TokenType.INT,
        TokenType.FLOAT,
        TokenType.CHAR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.FOR,
        TokenType.RETURN,
    }
)

_COMPARISON_OPS = (
    TokenType.LESS,
    TokenType.LESS_EQUAL,
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
)


@dataclass(frozen=True)
class SyntaxIssue:
    """One syntax error: where it was found, what went wrong, and at which token."""

    line: int
    message: str
    lexeme: str

    @classmethod
    def at(cls, token: Token, message: str) -> SyntaxIssue:
        lexeme = token.value or token_type_name(token.type)
        return cls(token.line, message, lexeme)

    def __str__(self) -> str:
        return f"语法错误 [行 {self.line}]: {self.message} (Token: {self.lexeme})"


class Parser:
    """Checks a token list against the grammar of the supported C subset.

    Errors do not stop the parse: each one is recorded in ``errors``,
    logged as a warning, and parsing resumes at the next likely
    statement start.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.EOF_TOKEN:
            raise ValueError("token list must end with an EOF token")
        self._current = 0
        self.errors: list[SyntaxIssue] = []

    def parse(self) -> bool:
        """Parse the whole token list; return True if no syntax error was found."""
        self._current = 0
        self.errors = []
        while not self._at_end():
            if not self._declaration():
                self._synchronize()
        ok = not self.errors
        if ok:
            _log.debug("语法分析成功！")
        return ok

    # Grammar rules

    def _declaration(self) -> bool:
        if not self._match(*_TYPE_KEYWORDS):
            return self._statement()

        if not self._match(TokenType.IDENTIFIER):
            return self._error(self._previous(), "变量或函数声明缺少标识符")

        if self._match(TokenType.LEFT_PAREN):
            if not self._match(TokenType.RIGHT_PAREN):
                return self._error(self._peek(), "函数参数列表解析未实现")
            if not self._statement():
                return self._error(self._peek(), "函数体解析失败")
            return True

        if self._match(TokenType.ASSIGNMENT) and not self._expression():
            return self._error(self._peek(), "变量初始化表达式无效")
        if not self._match(TokenType.SEMICOLON):
            return self._error(self._previous(), "变量声明缺少分号")
        return True

    def _statement(self) -> bool:
        if self._match(TokenType.LEFT_BRACE):
            while not self._check(TokenType.RIGHT_BRACE) and not self._at_end():
                if not self._declaration():
                    return False
            if not self._match(TokenType.RIGHT_BRACE):
                return self._error(self._peek(), "缺少右花括号")
            return True

        if self._match(TokenType.IF):
            if not self._match(TokenType.LEFT_PAREN):
                return self._error(self._peek(), "if语句缺少左括号")
            if not self._expression():
                return False
            if not self._match(TokenType.RIGHT_PAREN):
                return self._error(self._peek(), "if语句缺少右括号")
            if not self._statement():
                return False
            if self._match(TokenType.ELSE) and not self._statement():
                return False
            return True

        if self._match(TokenType.RETURN):
            if not self._check(TokenType.SEMICOLON) and not self._expression():
                return False
            if not self._match(TokenType.SEMICOLON):
                return self._error(self._previous(), "return语句缺少分号")
            return True

        return self._expression_statement()

    def _expression_statement(self) -> bool:
        if not self._expression():
            return False
        if not self._match(TokenType.SEMICOLON):
            return self._error(self._previous(), "缺少语句结束的分号")
        return True

    def _expression(self) -> bool:
        return self._assignment()

    def _assignment(self) -> bool:
        if self._match(TokenType.IDENTIFIER):
            if self._match(TokenType.ASSIGNMENT):
                if not self._assignment():
                    return self._error(self._peek(), "赋值表达式右侧无效")
                return True
            self._current -= 1
        return self._equality()

    def _binary(self, operand, *operators: TokenType) -> bool:
        if not operand():
            return False
        while self._match(*operators):
            if not operand():
                return False
        return True

    def _equality(self) -> bool:
        return self._binary(self._comparison, TokenType.EQUAL, TokenType.NOT_EQUAL)

    def _comparison(self) -> bool:
        return self._binary(self._term, *_COMPARISON_OPS)

    def _term(self) -> bool:
        return self._binary(self._factor, TokenType.PLUS, TokenType.MINUS)

    def _factor(self) -> bool:
        return self._binary(self._unary, TokenType.MULTIPLY, TokenType.DIVIDE)

    def _unary(self) -> bool:
        if self._match(TokenType.BANG, TokenType.MINUS):
            return self._unary()
        return self._primary()

    def _primary(self) -> bool:
        if self._match(TokenType.NUMBER, TokenType.IDENTIFIER):
            return True
        if self._match(TokenType.LEFT_PAREN):
            if not self._expression():
                return False
            if not self._match(TokenType.RIGHT_PAREN):
                return self._error(self._peek(), "缺少右括号")
            return True
        return self._error(self._peek(), "预期数字、标识符或括号表达式")

    # Token cursor

    def _match(self, *types: TokenType) -> bool:
        if any(self._check(t) for t in types):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        return not self._at_end() and self._peek().type is token_type

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous()

    def _at_end(self) -> bool:
        return self._peek().type is TokenType.EOF_TOKEN

    def _peek(self) -> Token:
        return self._tokens[self._current]

    def _previous(self) -> Token:
        return self._tokens[self._current - 1]

    def _error(self, token: Token, message: str) -> bool:
        issue = SyntaxIssue.at(token, message)
        self.errors.append(issue)
        _log.warning("%s", issue)
        return False

    def _synchronize(self) -> None:
        self._advance()
        while not self._at_end():
            if self._previous().type is TokenType.SEMICOLON:
                return
            if self._peek().type in _STATEMENT_STARTS:
                return
            self._advance()


def parse(tokens: Iterable[Token]) -> list[SyntaxIssue]:
    """Parse ``tokens`` and return the syntax errors found; empty means accepted."""
    parser = Parser(tokens)
    parser.parse()
    return parser.errors