# parser.py
"""Operator-precedence (Pratt) parser.

Each token kind may have a *nud* (what it means at the start of an
expression) and a *led* (what it means after a complete left operand).
``parse(rbp)`` reads one nud, then keeps folding leds into the left operand
while the next token binds tighter than ``rbp``.

    2 + 3 * 4 ^ 2 ^ 0.5      ->  2 + (3 * (4 ^ (2 ^ 0.5)))

``^`` recurses with ``bp - 1`` on its right side, which makes it
right-associative; every other operator is left-associative.
"""
from __future__ import annotations

from typing import Callable, Mapping, Sequence

from .errors import ArityOrTypeError, InvocationError, UnknownIdentifierError
from .identifiers import DEFAULT_IDENTIFIERS, Resolved, resolve
from .lexer import Token, TokenCursor, TokenKind, tokenize
from .nodes import BinaryOp, BinaryOperator, FunctionCall, Identifier, Literal, Negation, Node
from .units import UnitValue, parse_unit_value
from .validator import validate

BINDING_POWERS: Mapping[TokenKind, int] = {
    TokenKind.PLUS: 20,
    TokenKind.MINUS: 20,
    TokenKind.STAR: 30,
    TokenKind.SLASH: 30,
    TokenKind.CARET: 40,
    TokenKind.LPAREN: 50,
}

_INFIX: Mapping[TokenKind, BinaryOperator] = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUB,
    TokenKind.STAR: BinaryOperator.MUL,
    TokenKind.SLASH: BinaryOperator.DIV,
    TokenKind.CARET: BinaryOperator.POW,
}


def binding_power(token: Token) -> int:
    return BINDING_POWERS.get(token.kind, 0)


def _unexpected(token: Token) -> ArityOrTypeError:
    return ArityOrTypeError(f"Unexpected token: {token.text or '<<EOF>>'}")


class Parser:
    """Builds a :mod:`~csscalc.nodes` tree from an already validated token list."""

    def __init__(self, tokens: Sequence[Token], identifiers: Mapping[str, Resolved] = DEFAULT_IDENTIFIERS):
        self.cursor = TokenCursor(tokens)
        self.identifiers = identifiers

    def parse(self, rbp: int = 0) -> Node:
        left = self.nud(self.cursor.next())
        while binding_power(self.cursor.peek()) > rbp:
            left = self.led(left, self.cursor.next())
        return left

    def parse_all(self) -> Node:
        """Parse one expression and insist it covers every token."""
        tree = self.parse()
        if not self.cursor.at_end():
            raise _unexpected(self.cursor.peek())
        return tree

    # ──────────────────────────────────────────────────────────────────
    # Dispatch
    # ──────────────────────────────────────────────────────────────────
    def nud(self, token: Token) -> Node:
        handler = _NUDS.get(token.kind)
        if handler is None:
            raise _unexpected(token)
        return handler(self, token)

    def led(self, left: Node, token: Token) -> Node:
        handler = _LEDS.get(token.kind)
        if handler is None:
            raise _unexpected(token)
        return handler(self, left, token)

    # ──────────────────────────────────────────────────────────────────
    # Prefix handlers
    # ──────────────────────────────────────────────────────────────────
    def _number_with_unit(self, token: Token) -> Node:
        return Literal(parse_unit_value(token.text))

    def _number(self, token: Token) -> Node:
        return Literal(UnitValue(float(token.text)))

    def _identifier(self, token: Token) -> Node:
        ref = resolve(token.text, self.identifiers)
        if ref is None:
            where = f" at line {token.line}, column {token.column}" if token.line else ""
            raise UnknownIdentifierError(
                f"Unknown expression: '{token.text}'{where}. "
                "Only Math constants and functions are supported.",
                token.line or None,
                token.column or None,
            )
        return Identifier(token.text, ref)

    def _positive(self, token: Token) -> Node:
        return self.parse(binding_power(token))

    def _negative(self, token: Token) -> Node:
        return Negation(self.parse(binding_power(token)))

    def _group(self, token: Token) -> Node:
        inner = self.parse()
        self.cursor.expect(TokenKind.RPAREN)
        return inner

    # ──────────────────────────────────────────────────────────────────
    # Infix handlers
    # ──────────────────────────────────────────────────────────────────
    def _binary(self, left: Node, token: Token) -> Node:
        return BinaryOp(_INFIX[token.kind], left, self.parse(binding_power(token)))

    def _power(self, left: Node, token: Token) -> Node:
        return BinaryOp(BinaryOperator.POW, left, self.parse(binding_power(token) - 1))

    def _call(self, left: Node, token: Token) -> Node:
        if not isinstance(left, Identifier):
            raise InvocationError("Cannot invoke expression as if it was a function")
        if not left.is_function:
            raise InvocationError("Cannot invoke non-function")
        argument = self.parse()
        self.cursor.expect(TokenKind.RPAREN)
        return FunctionCall(left, argument)


_NUDS: Mapping[TokenKind, Callable[[Parser, Token], Node]] = {
    TokenKind.NUMBER_WITH_UNIT: Parser._number_with_unit,
    TokenKind.NUMBER: Parser._number,
    TokenKind.ID: Parser._identifier,
    TokenKind.PLUS: Parser._positive,
    TokenKind.MINUS: Parser._negative,
    TokenKind.LPAREN: Parser._group,
}

_LEDS: Mapping[TokenKind, Callable[[Parser, Node, Token], Node]] = {
    TokenKind.PLUS: Parser._binary,
    TokenKind.MINUS: Parser._binary,
    TokenKind.STAR: Parser._binary,
    TokenKind.SLASH: Parser._binary,
    TokenKind.CARET: Parser._power,
    TokenKind.LPAREN: Parser._call,
}


def parse(source: str, identifiers: Mapping[str, Resolved] = DEFAULT_IDENTIFIERS) -> Node:
    """Tokenize, validate and parse *source* into a tree."""
    tokens = tokenize(source)
    validate(tokens)
    return Parser(tokens, identifiers).parse_all()
