# __main__.py
"""Command line front end.

    python -m csscalc "10px + 5px" "floor(3.7em)"
    python -m csscalc            # interactive prompt, "exit" to quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .errors import CalcError
from .evaluator import Result, evaluate
from .units import format_number

_FLAGS = frozenset({"-v", "--verbose", "-h", "--help"})


def _show(result: Result) -> str:
    return result if isinstance(result, str) else format_number(result)


def _mark_expressions(argv: Sequence[str]) -> list[str]:
    """Insert ``--`` before the first expression so ``-5px`` is not taken for a flag."""
    argv = list(argv)
    if "--" in argv:
        return argv
    for i, arg in enumerate(argv):
        if arg not in _FLAGS:
            return argv[:i] + ["--"] + argv[i:]
    return argv


def _repl() -> int:
    eval_count = 1
    while True:
        try:
            expr = input(f"In [{eval_count}]: ")
        except EOFError:
            print()
            return 0
        if expr.strip() == "exit":
            return 0
        if not expr.strip():
            continue
        try:
            print(f"Out [{eval_count}]: {_show(evaluate(expr))}")
        except CalcError as e:
            print(e)
        eval_count += 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="csscalc", description="Evaluate CSS calc()-style expressions.")
    ap.add_argument("expressions", nargs="*", help="expressions to evaluate; omit for a prompt")
    ap.add_argument("-v", "--verbose", action="store_true", help="log each evaluation")
    args = ap.parse_args(_mark_expressions(sys.argv[1:] if argv is None else argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.expressions:
        return _repl()
    for expr in args.expressions:
        try:
            print(_show(evaluate(expr)))
        except CalcError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
