# nodes.py
"""The expression tree built by the parser. A closed set of frozen records."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from .identifiers import Resolved, UnaryFunction
from .units import UnitValue


class BinaryOperator(enum.Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


@dataclass(frozen=True)
class Literal:
    value: UnitValue


@dataclass(frozen=True)
class Identifier:
    name: str
    ref: Resolved

    @property
    def is_function(self) -> bool:
        return isinstance(self.ref, UnaryFunction)


@dataclass(frozen=True)
class BinaryOp:
    op: BinaryOperator
    left: Node
    right: Node


@dataclass(frozen=True)
class FunctionCall:
    target: Identifier
    argument: Node


@dataclass(frozen=True)
class Negation:
    operand: Node


Node = Union[Literal, Identifier, BinaryOp, FunctionCall, Negation]
