# errors.py
"""Exceptions raised while evaluating a calc() expression.

Every failure aborts the evaluation. All of them derive from
:class:`CalcError`, itself a :class:`ValueError`, so callers that only care
about "bad input" can catch the builtin.
"""
from __future__ import annotations

from typing import Optional


class CalcError(ValueError):
    """Base class for every evaluation failure."""


class _PositionedError(CalcError):
    """An error that may point at a place in the source text."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column


class LexError(_PositionedError):
    """Unrecognised character or malformed number literal."""


class StructuralError(CalcError):
    """Token sequence rejected before parsing (adjacency, balance)."""


class UnknownIdentifierError(_PositionedError):
    """Name missing from the identifier table."""


class InvocationError(CalcError):
    """Call syntax applied to something that is not a function."""


class UnitMismatchError(CalcError):
    """Operands whose units cannot be combined by the operator."""


class ArityOrTypeError(CalcError):
    """Malformed grammar, e.g. a missing ``)`` or a stray operator."""
