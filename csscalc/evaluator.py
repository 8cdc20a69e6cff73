# evaluator.py
"""Tree evaluation under calc() unit rules, and the public ``evaluate`` helper.

>>> evaluate("10px + 5px")
'15px'
>>> evaluate("2 ^ 3")
8.0
>>> evaluate("10px / 5px")
'2'
"""
from __future__ import annotations

import logging
from typing import Mapping, Union

from .errors import ArityOrTypeError
from .identifiers import DEFAULT_IDENTIFIERS, UNIT_PRESERVING, Constant, Resolved
from .nodes import BinaryOp, BinaryOperator, FunctionCall, Identifier, Literal, Negation, Node
from .parser import parse
from .units import UnitValue, format_number

log = logging.getLogger(__name__)

Result = Union[float, str]

_BINARY_IMPL = {
    BinaryOperator.ADD: UnitValue.__add__,
    BinaryOperator.SUB: UnitValue.__sub__,
    BinaryOperator.MUL: UnitValue.__mul__,
    BinaryOperator.DIV: UnitValue.__truediv__,
    BinaryOperator.POW: UnitValue.__pow__,
}


def visit(node: Node) -> UnitValue:
    """Evaluate *node* bottom-up."""
    match node:
        case Literal(value=v):
            return v
        case Identifier(ref=Constant(value=v)):
            return UnitValue(v)
        case Identifier(name=name):
            raise ArityOrTypeError(f"'{name}' is a function and must be called")
        case Negation(operand=operand):
            return -visit(operand)
        case BinaryOp(op=op, left=left, right=right):
            return _BINARY_IMPL[op](visit(left), visit(right))
        case FunctionCall(target=target, argument=argument):
            arg = visit(argument)
            unit = arg.unit if target.name in UNIT_PRESERVING else None
            return UnitValue(target.ref(arg.magnitude), unit)
    raise AssertionError(f"Unhandled node: {node!r}")


def render(value: UnitValue) -> Result:
    """Plain float for unit-less values, ``"<number><unit>"`` otherwise.

    A value that lost its unit through ``px / px`` style cancellation is
    rendered as a string of its number.
    """
    if not value.is_unitless():
        return str(value)
    if value.from_unit_division:
        return format_number(value.magnitude)
    return value.magnitude


def evaluate(expression: str, identifiers: Mapping[str, Resolved] = DEFAULT_IDENTIFIERS) -> Result:
    """Evaluate a calc() expression string.

    The expression may contain:
      * numbers, optionally suffixed with px em rem % vh vw vmin vmax cm mm in pt pc
      * +, -, *, /, ^ operators and parentheses
      * names from *identifiers* (``PI``, ``floor(...)``, ...)
    """
    tree = parse(expression, identifiers)
    result = render(visit(tree))
    log.debug("evaluated %r -> %r", expression, result)
    return result


calc = evaluate
