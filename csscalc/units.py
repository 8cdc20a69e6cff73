# units.py
"""Numbers tagged with a CSS unit.

A :class:`UnitValue` is a float magnitude plus at most one :class:`Unit`.
Arithmetic follows calc() rules: sums need matching units, a product needs
at least one plain number, a quotient either divides by a plain number or
cancels two equal units, and powers only work on plain numbers.
"""
from __future__ import annotations

import enum
import math
import re
from decimal import Decimal
from typing import Optional

from .errors import LexError, UnitMismatchError


class Unit(str, enum.Enum):
    PX = "px"
    EM = "em"
    REM = "rem"
    PERCENT = "%"
    VH = "vh"
    VW = "vw"
    VMIN = "vmin"
    VMAX = "vmax"
    CM = "cm"
    MM = "mm"
    IN = "in"
    PT = "pt"
    PC = "pc"

    def __str__(self) -> str:
        return self.value


# Longest first so that "rem" is never read as "r" + "em" and friends.
UNIT_PATTERN = "|".join(
    re.escape(u.value) for u in sorted(Unit, key=lambda u: len(u.value), reverse=True)
)
# ASCII digits only
NUMBER_PATTERN = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"

_UNIT_VALUE_RE = re.compile(rf"(?P<num>{NUMBER_PATTERN})(?P<unit>{UNIT_PATTERN})")


def format_number(x: float) -> str:
    """Render a magnitude the way JavaScript's ``Number#toString`` does.

    ``15`` not ``15.0``, ``0.000001`` not ``1e-06``, ``1e+21`` not
    ``1000000000000000000000``.
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    sign = "-" if x < 0 else ""
    # repr gives the shortest digit string that round-trips
    _, digit_tuple, exponent = Decimal(repr(abs(x))).as_tuple()
    raw = "".join(map(str, digit_tuple))
    digits = raw.rstrip("0")
    exponent += len(raw) - len(digits)
    k = len(digits)
    n = k + exponent             # position of the decimal point

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _unit_name(unit: Optional[Unit]) -> str:
    return "none" if unit is None else unit.value


class UnitValue:
    """A magnitude with an optional unit."""

    __slots__ = ("magnitude", "unit", "from_unit_division")

    magnitude: float
    unit: Optional[Unit]
    from_unit_division: bool     # only set by px/px style cancellation

    def __init__(self, magnitude: float, unit: Optional[Unit] = None, from_unit_division: bool = False):
        self.magnitude = float(magnitude)
        self.unit = None if unit is None else Unit(unit)
        self.from_unit_division = from_unit_division

    def is_unitless(self) -> bool:
        return self.unit is None

    # ------------------------------------------------------------------
    # Arithmetic. Results never inherit from_unit_division.
    # ------------------------------------------------------------------
    def _same_unit(self, other: UnitValue, verb: str) -> Optional[Unit]:
        if self.unit != other.unit:
            raise UnitMismatchError(
                f"Cannot {verb} values with different units: "
                f"{_unit_name(self.unit)} and {_unit_name(other.unit)}"
            )
        return self.unit

    def __add__(self, other: UnitValue) -> UnitValue:
        unit = self._same_unit(other, "add")
        return UnitValue(self.magnitude + other.magnitude, unit)

    def __sub__(self, other: UnitValue) -> UnitValue:
        unit = self._same_unit(other, "subtract")
        return UnitValue(self.magnitude - other.magnitude, unit)

    def __mul__(self, other: UnitValue) -> UnitValue:
        if self.unit is not None and other.unit is not None:
            raise UnitMismatchError(
                f"Cannot multiply two unit-bearing values: {self.unit} and {other.unit}"
            )
        return UnitValue(self.magnitude * other.magnitude, self.unit or other.unit)

    def __truediv__(self, other: UnitValue) -> UnitValue:
        quotient = _ieee_divide(self.magnitude, other.magnitude)
        if other.unit is None:
            return UnitValue(quotient, self.unit)
        if self.unit == other.unit:
            return UnitValue(quotient, None, from_unit_division=True)
        raise UnitMismatchError(
            f"Cannot divide incompatible units: {_unit_name(self.unit)} and {other.unit}"
        )

    def __pow__(self, other: UnitValue) -> UnitValue:
        if self.unit is not None or other.unit is not None:
            raise UnitMismatchError(
                "Power operations can only be performed on unitless values "
                f"(got {_unit_name(self.unit)} and {_unit_name(other.unit)})"
            )
        return UnitValue(_real_power(self.magnitude, other.magnitude))

    def __neg__(self) -> UnitValue:
        return UnitValue(-self.magnitude, self.unit)

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitValue):
            return NotImplemented
        return self.magnitude == other.magnitude and self.unit == other.unit

    def __hash__(self) -> int:
        return hash((self.magnitude, self.unit))

    def __repr__(self) -> str:
        return f"UnitValue({self.magnitude!r}, {self.unit!r})"

    def __str__(self) -> str:
        return format_number(self.magnitude) + ("" if self.unit is None else self.unit.value)


def parse_unit_value(literal: str) -> UnitValue:
    """Split a lexed ``NUMBER_WITH_UNIT`` literal such as ``"12.5px"``."""
    m = _UNIT_VALUE_RE.fullmatch(literal)
    if m is None:
        raise LexError(f"Not a number with a unit: {literal!r}")
    return UnitValue(float(m.group("num")), Unit(m.group("unit")))


def _ieee_divide(a: float, b: float) -> float:
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _real_power(base: float, exponent: float) -> float:
    if base == 0.0 and exponent < 0:
        return math.inf
    try:
        result = math.pow(base, exponent)
    except ValueError:
        # negative base with a fractional exponent
        return math.nan
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    return result
