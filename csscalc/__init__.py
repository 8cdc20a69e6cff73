"""Evaluate CSS calc()-style expressions over unit-tagged numbers."""
from .errors import (
    ArityOrTypeError,
    CalcError,
    InvocationError,
    LexError,
    StructuralError,
    UnitMismatchError,
    UnknownIdentifierError,
)
from .evaluator import calc, evaluate, render, visit
from .identifiers import DEFAULT_IDENTIFIERS, Constant, UnaryFunction
from .parser import parse
from .units import Unit, UnitValue

__all__ = [
    "ArityOrTypeError",
    "CalcError",
    "Constant",
    "DEFAULT_IDENTIFIERS",
    "InvocationError",
    "LexError",
    "StructuralError",
    "UnaryFunction",
    "Unit",
    "UnitMismatchError",
    "UnitValue",
    "UnknownIdentifierError",
    "calc",
    "evaluate",
    "parse",
    "render",
    "visit",
]
