# identifiers.py
"""Names an expression may refer to: numeric constants and one-argument functions."""
from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union


@dataclass(frozen=True)
class Constant:
    value: float


@dataclass(frozen=True)
class UnaryFunction:
    name: str
    fn: Callable[[float], float]

    def __call__(self, x: float) -> float:
        return self.fn(x)


Resolved = Union[Constant, UnaryFunction]


def _total(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Turn domain and range errors into nan/inf like IEEE arithmetic would."""
    def wrapper(x: float) -> float:
        if math.isnan(x):
            return math.nan
        try:
            return float(fn(x))
        except ValueError:
            return math.nan
        except OverflowError:
            if fn in (math.exp, math.cosh):
                return math.inf
            return math.copysign(math.inf, x)
    wrapper.__name__ = fn.__name__
    return wrapper


def _log(x: float) -> float:
    return -math.inf if x == 0 else math.log(x)


def _log10(x: float) -> float:
    return -math.inf if x == 0 else math.log10(x)


def _log2(x: float) -> float:
    return -math.inf if x == 0 else math.log2(x)


def _log1p(x: float) -> float:
    return -math.inf if x == -1 else math.log1p(x)


def _atanh(x: float) -> float:
    if abs(x) == 1:
        return math.copysign(math.inf, x)
    return math.atanh(x)


def _floor(x: float) -> float:
    return x if math.isinf(x) else math.floor(x)


def _ceil(x: float) -> float:
    return x if math.isinf(x) else math.ceil(x)


def _trunc(x: float) -> float:
    return x if math.isinf(x) else math.trunc(x)


def _round(x: float) -> float:
    # halves go towards +infinity: round(-2.5) == -2
    return x if math.isinf(x) else math.floor(x + 0.5)


def _sign(x: float) -> float:
    if x == 0:
        return x
    return math.copysign(1.0, x)


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


_CONSTANTS = {
    "E": math.e,
    "LN2": math.log(2),
    "LN10": math.log(10),
    "LOG2E": math.log2(math.e),
    "LOG10E": math.log10(math.e),
    "PI": math.pi,
    "SQRT1_2": math.sqrt(0.5),
    "SQRT2": math.sqrt(2),
}

_FUNCTIONS = {
    "abs": abs,
    "acos": math.acos,
    "acosh": math.acosh,
    "asin": math.asin,
    "asinh": math.asinh,
    "atan": math.atan,
    "atanh": _atanh,
    "cbrt": _cbrt,
    "ceil": _ceil,
    "cos": math.cos,
    "cosh": math.cosh,
    "exp": math.exp,
    "expm1": math.expm1,
    "floor": _floor,
    "log": _log,
    "log1p": _log1p,
    "log10": _log10,
    "log2": _log2,
    "round": _round,
    "sign": _sign,
    "sin": math.sin,
    "sinh": math.sinh,
    "sqrt": math.sqrt,
    "tan": math.tan,
    "tanh": math.tanh,
    "trunc": _trunc,
}

DEFAULT_IDENTIFIERS: Mapping[str, Resolved] = MappingProxyType({
    **{name: Constant(value) for name, value in _CONSTANTS.items()},
    **{name: UnaryFunction(name, _total(fn)) for name, fn in _FUNCTIONS.items()},
})

# Functions whose result keeps the unit of their argument.
UNIT_PRESERVING = frozenset({"floor", "ceil", "abs", "cos"})


def resolve(name: str, table: Mapping[str, Resolved] = DEFAULT_IDENTIFIERS) -> Optional[Resolved]:
    return table.get(name)
