"""Numeric helpers shared by the token builders (pure functions)."""

from __future__ import annotations

import math
import re
from typing import Optional, Union


ROOT_FONT_SIZE_PX = 16

REM_RE = re.compile(r"^(-?(?:\d+(?:\.\d*)?|\.\d+))rem$")
FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_rem(value: str) -> Optional[float]:
    """Parse a bare `<number>rem` value; anything else (px, em, calc) is None."""
    m = REM_RE.match((value or "").strip())
    if not m:
        return None
    return float(m.group(1))


def rem_to_px(rem: float) -> float:
    return rem * ROOT_FONT_SIZE_PX


def round_to(value: float, places: int = 3) -> float:
    # half-up, so 0.0005 -> 0.001 regardless of float banking
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def parse_float(text: str) -> Optional[float]:
    """Leading-number parse: "1.5", " 1.5rem" -> 1.5; "normal" -> None."""
    m = FLOAT_PREFIX_RE.match(text or "")
    if not m:
        return None
    v = float(m.group(1))
    if not math.isfinite(v):
        return None
    return v


def parse_int_prefix(text: str) -> Optional[int]:
    m = INT_PREFIX_RE.match(text or "")
    if not m:
        return None
    return int(m.group(1))


def clean_number(value: Union[int, float]) -> Union[int, float]:
    """Collapse integral floats so they serialize as `4` instead of `4.0`."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_multiplier(multiplier: Union[int, float]) -> str:
    """Natural decimal form used in spacing keys: 0.5 -> "0.5", 4 -> "4"."""
    return str(clean_number(multiplier))
