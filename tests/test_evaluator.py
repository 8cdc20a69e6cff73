import math

import pytest

from csscalc import (
    DEFAULT_IDENTIFIERS,
    ArityOrTypeError,
    CalcError,
    Constant,
    InvocationError,
    LexError,
    StructuralError,
    UnaryFunction,
    UnitMismatchError,
    UnknownIdentifierError,
    calc,
    evaluate,
)


@pytest.mark.parametrize("expr, expected", [
    ("2 + 3", 5),
    ("2 - 3", -1),
    ("2 * 3", 6),
    ("3 / 2", 1.5),
    ("2 ^ 3", 8),
    ("2 ^ 3 ^ 2", 512),
    ("1 + 2 * 3", 7),
    ("(1 + 2) * 3", 9),
    ("10 - 4 - 3", 3),
    ("-5", -5),
    ("+5", 5),
    ("1 + -2", -1),
    ("1 - -2", 3),
    ("3 * -4", -12),
    ("-2 ^ 2", -4),
    (".5 + 1.", 1.5),
])
def test_plain_arithmetic(expr, expected):
    assert evaluate(expr) == expected


def test_plain_results_are_floats():
    assert isinstance(evaluate("2 + 3"), float)


@pytest.mark.parametrize("expr, expected", [
    ("10px + 5px", "15px"),
    ("10px - 5px", "5px"),
    ("2 * 3px", "6px"),
    ("3px * 2", "6px"),
    ("10px / 4", "2.5px"),
    ("-5em", "-5em"),
    ("(1rem + 2rem) * 2", "6rem"),
    ("50% - 10%", "40%"),
    ("1.5vmin * 2", "3vmin"),
    ("12pt + .5pt", "12.5pt"),
])
def test_unit_arithmetic(expr, expected):
    assert evaluate(expr) == expected


def test_division_cancellation_renders_bare_number():
    assert evaluate("10px / 5px") == "2"
    assert evaluate("5em / 2em") == "2.5"


def test_cancelled_value_used_further_is_plain():
    assert evaluate("10px / 5px + 1") == 3
    assert evaluate("(10px / 5px) * 3px") == "6px"


@pytest.mark.parametrize("expr, match", [
    ("10px + 5em", "px and em"),
    ("10px - 5", "px and none"),
    ("2px * 3px", "Cannot multiply two unit-bearing values"),
    ("10px / 5em", "Cannot divide incompatible units"),
    ("10 / 5px", "Cannot divide incompatible units"),
    ("2px ^ 2", "unitless"),
    ("2 ^ 2px", "unitless"),
])
def test_unit_errors(expr, match):
    with pytest.raises(UnitMismatchError, match=match):
        evaluate(expr)


def test_constants_and_functions():
    assert evaluate("PI") == math.pi
    assert evaluate("E") == math.e
    assert evaluate("floor(3.7px)") == "3px"
    assert evaluate("ceil(3.2em)") == "4em"
    assert evaluate("abs(-4%)") == "4%"
    assert evaluate("cos(0px)") == "1px"
    assert evaluate("sqrt(16)") == 4
    assert evaluate("sqrt(16px)") == 4
    assert evaluate("round(2.5)") == 3
    assert evaluate("round(-2.5)") == -2
    assert evaluate("2 * floor(PI)") == 6
    assert evaluate("floor(-PI)") == -4


def test_domain_errors_give_nan():
    assert math.isnan(evaluate("sqrt(-1)"))
    assert evaluate("log(0)") == -math.inf


def test_division_by_zero():
    assert evaluate("1 / 0") == math.inf
    assert evaluate("1px / 0") == "Infinitypx"


def test_function_without_call():
    with pytest.raises(ArityOrTypeError, match="'floor' is a function"):
        evaluate("floor + 1")


@pytest.mark.parametrize("expr, error", [
    ("12abc", LexError),
    ("1 # 2", LexError),
    ("٣ + 1", LexError),
    ("1 + + 2", StructuralError),
    ("1 --2", StructuralError),
    ("1 - - 2", StructuralError),
    ("1 2", StructuralError),
    ("(1 + 2", StructuralError),
    ("1 + 2)", StructuralError),
    ("foo(1)", UnknownIdentifierError),
    ("PI(1)", InvocationError),
    ("(2)(1)", InvocationError),
    ("", ArityOrTypeError),
    ("2 *", ArityOrTypeError),
])
def test_rejected_input(expr, error):
    with pytest.raises(error):
        evaluate(expr)


def test_error_messages():
    with pytest.raises(LexError, match="12abc"):
        evaluate("12abc")
    with pytest.raises(StructuralError, match="Unmatched opening parenthesis"):
        evaluate("(1 + 2")
    with pytest.raises(StructuralError, match="Unmatched closing parenthesis"):
        evaluate("1 + 2)")


def test_every_error_is_a_value_error():
    with pytest.raises(ValueError):
        evaluate("10px + 5em")
    with pytest.raises(CalcError):
        evaluate("nope")


def test_idempotent_and_tables_untouched():
    before = dict(DEFAULT_IDENTIFIERS)
    assert evaluate("floor(3.7px) + 1px") == evaluate("floor(3.7px) + 1px") == "4px"
    assert dict(DEFAULT_IDENTIFIERS) == before
    with pytest.raises(TypeError):
        DEFAULT_IDENTIFIERS["PI"] = Constant(3)


def test_injected_identifiers():
    table = {
        "TAU": Constant(2 * math.pi),
        "double": UnaryFunction("double", lambda x: 2 * x),
    }
    assert evaluate("TAU / 2", identifiers=table) == math.pi
    assert evaluate("double(4px)", identifiers=table) == 8
    with pytest.raises(UnknownIdentifierError):
        evaluate("PI", identifiers=table)


def test_calc_alias():
    assert calc is evaluate
