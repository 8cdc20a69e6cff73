# lexer.py
"""Tokenizer and the forward-only cursor the parser reads tokens through."""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import ArityOrTypeError, LexError
from .units import NUMBER_PATTERN, UNIT_PATTERN


class TokenKind(enum.Enum):
    NUMBER = "NUMBER"
    NUMBER_WITH_UNIT = "NUMBER_WITH_UNIT"
    ID = "ID"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    CARET = "^"
    LPAREN = "("
    RPAREN = ")"
    EOF = "<<EOF>>"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    line: int = 0
    column: int = 0


EOF = Token(TokenKind.EOF, "")

# ──────────────────────────────────────────────────────────────────────────────
# Rules, tried in order against the start of the unconsumed input
# ──────────────────────────────────────────────────────────────────────────────
_WHITESPACE = None

_RULES: tuple[tuple[Optional[TokenKind], re.Pattern[str]], ...] = (
    (TokenKind.NUMBER_WITH_UNIT, re.compile(rf"{NUMBER_PATTERN}(?:{UNIT_PATTERN})(?![A-Za-z0-9])")),
    (TokenKind.NUMBER, re.compile(rf"{NUMBER_PATTERN}(?![A-Za-z0-9])")),
    (TokenKind.ID, re.compile(r"[A-Za-z]+")),
    (TokenKind.PLUS, re.compile(r"\+")),
    (TokenKind.MINUS, re.compile(r"-")),
    (TokenKind.STAR, re.compile(r"\*")),
    (TokenKind.SLASH, re.compile(r"/")),
    (TokenKind.CARET, re.compile(r"\^")),
    (TokenKind.LPAREN, re.compile(r"\(")),
    (TokenKind.RPAREN, re.compile(r"\)")),
    (_WHITESPACE, re.compile(r"\s+")),
)

_MALFORMED_NUMBER_RE = re.compile(r"[0-9]+[A-Za-z0-9]+")


def _position(source: str, offset: int) -> tuple[int, int]:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def tokenize(source: str) -> list[Token]:
    """Split *source* into tokens, dropping whitespace."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(source):
        for kind, pattern in _RULES:
            m = pattern.match(source, pos)
            if m is not None:
                break
        else:
            line, column = _position(source, pos)
            bad = _MALFORMED_NUMBER_RE.match(source, pos)
            if bad is not None:
                raise LexError(f'Invalid number format: "{bad.group()}"', line, column)
            raise LexError(f"Unexpected character in input: {source[pos]}", line, column)

        if kind is not _WHITESPACE:
            line, column = _position(source, pos)
            tokens.append(Token(kind, m.group(), line, column))
        pos = m.end()
    return tokens


class TokenCursor:
    """Lookahead-1 reader over a token list; yields :data:`EOF` past the end."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = tokens
        self.position = 0

    def peek(self) -> Token:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return EOF

    def next(self) -> Token:
        token = self.peek()
        self.position += 1
        return token

    def expect(self, kind: TokenKind) -> Token:
        token = self.next()
        if token.kind is not kind:
            raise ArityOrTypeError(f"Unexpected token: {token.text or '<<EOF>>'}")
        return token

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)
