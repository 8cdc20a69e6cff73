# validator.py
"""Structural checks over the whole token list, run before parsing."""
from __future__ import annotations

from typing import Optional, Sequence

from .errors import StructuralError
from .lexer import Token, TokenKind

_NUMERIC = frozenset({TokenKind.NUMBER, TokenKind.NUMBER_WITH_UNIT})
_OPERATORS = frozenset({
    TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH, TokenKind.CARET,
})


def touches(first: Token, second: Token) -> bool:
    """True when *second* starts right where *first* ends in the source."""
    return bool(first.line) and first.line == second.line and first.column + len(first.text) == second.column


def check_adjacent_numbers(tokens: Sequence[Token]) -> None:
    for current, following in zip(tokens, tokens[1:]):
        if current.kind in _NUMERIC and following.kind in _NUMERIC:
            raise StructuralError("Adjacent numbers are not allowed")


def _is_signed_operand(minus: Token, operand: Optional[Token]) -> bool:
    # "-2" or "-(..." written as one piece
    return operand is not None and operand.kind not in _OPERATORS and touches(minus, operand)


def check_consecutive_operators(tokens: Sequence[Token]) -> None:
    """Reject operator pairs.

    ``-`` may follow any other operator as a sign. After another ``-`` it is
    only accepted when it stands apart from that first minus and is glued to
    its operand, as in ``1 - -2``; ``1 --2`` and ``1 - - 2`` are rejected.
    """
    for i in range(len(tokens) - 1):
        current, following = tokens[i], tokens[i + 1]
        if current.kind not in _OPERATORS or following.kind not in _OPERATORS:
            continue
        if current.kind is TokenKind.MINUS and following.kind is TokenKind.MINUS:
            operand = tokens[i + 2] if i + 2 < len(tokens) else None
            if touches(current, following) or not _is_signed_operand(following, operand):
                raise StructuralError("Double minus (--) is not allowed")
            continue
        if following.kind is TokenKind.MINUS:
            continue
        raise StructuralError("Consecutive operators are not allowed")


def check_parentheses(tokens: Sequence[Token]) -> None:
    depth = 0
    for token in tokens:
        if token.kind is TokenKind.LPAREN:
            depth += 1
        elif token.kind is TokenKind.RPAREN:
            depth -= 1
            if depth < 0:
                raise StructuralError("Unmatched closing parenthesis")
    if depth > 0:
        raise StructuralError("Unmatched opening parenthesis")


def validate(tokens: Sequence[Token]) -> None:
    check_adjacent_numbers(tokens)
    check_consecutive_operators(tokens)
    check_parentheses(tokens)
