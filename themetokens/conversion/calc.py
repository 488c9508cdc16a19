"""Tiny `calc()` evaluator for theme line-height formulas.

Supports exactly one `/` or `*` between two numbers (`calc(1.25 / 0.875)`),
or a bare number. No nesting, no `+`/`-`, no precedence.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from themetokens.conversion.units import parse_float


CALC_RE = re.compile(r"calc\(([^)]*)\)")


def _binary(expr: str, op: str) -> Optional[float]:
    left, right = expr.split(op, 1)
    a = parse_float(left)
    b = parse_float(right)
    if a is None or b is None:
        return None
    if op == "/":
        if b == 0:
            return None
        return a / b
    return a * b


def evaluate_calc(value: str) -> Optional[float]:
    m = CALC_RE.match((value or "").strip())
    if not m:
        return parse_float(value)

    expr = m.group(1).strip()
    if "/" in expr:
        result = _binary(expr, "/")
    elif "*" in expr:
        result = _binary(expr, "*")
    else:
        result = parse_float(expr)

    if result is None or not math.isfinite(result):
        return None
    return result
