"""Per-category token builders.

Every builder takes the full theme CSS text and returns a CategoryResult.
Values that can't be converted are logged and skipped; they never abort
the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple

from themetokens.conversion.calc import evaluate_calc
from themetokens.conversion.color import hex_to_components, resolve_color_hex
from themetokens.conversion.units import (
    clean_number,
    format_multiplier,
    parse_int_prefix,
    parse_rem,
    rem_to_px,
    round_to,
)
from themetokens.extraction.css_vars import (
    BREAKPOINT_RE,
    COLOR_RE,
    CONTAINER_RE,
    FONT_WEIGHT_RE,
    LEADING_RE,
    RADIUS_RE,
    SPACING_RE,
    TEXT_LINE_HEIGHT_RE,
    TEXT_RE,
    TRACKING_RE,
    extract_shadow_vars,
    extract_single,
    extract_vars,
)


logger = logging.getLogger(__name__)

SPACING_MULTIPLIERS = [
    0, 0.5, 1, 1.5, 2, 2.5, 3, 3.5, 4, 5, 6, 7, 8, 9, 10, 11, 12, 14, 16,
    20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 96,
]


@dataclass
class CategoryResult:
    category: str
    tokens: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    found: int = 0
    skipped: List[Tuple[str, str]] = field(default_factory=list)

    def skip(self, name: str, value: str, reason: str) -> None:
        logger.warning("%s: could not convert %s = %s (%s)", self.category, name, value, reason)
        self.skipped.append((name, value))


def color_token(hex_value: str) -> Dict[str, Any]:
    return {
        "$type": "color",
        "$value": {
            "colorSpace": "srgb",
            "components": [clean_number(c) for c in hex_to_components(hex_value)],
            "hex": hex_value,
        },
    }


def number_token(value: float) -> Dict[str, Any]:
    return {"$type": "number", "$value": clean_number(value)}


def string_token(value: str) -> Dict[str, Any]:
    return {"$type": "string", "$value": value}


def _warn_if_empty(result: CategoryResult) -> CategoryResult:
    if result.found == 0:
        logger.warning("%s: no variables found", result.category)
    return result


def build_color_tokens(css_text: str) -> CategoryResult:
    result = CategoryResult("Color")
    variables = extract_vars(css_text, COLOR_RE)
    result.found = len(variables)
    for name, value in variables.items():
        hex_value = resolve_color_hex(value)
        if not hex_value:
            result.skip(name, value, "unsupported color format")
            continue
        result.tokens[f"color-{name}"] = color_token(hex_value)
    return _warn_if_empty(result)


def build_spacing_tokens(css_text: str) -> CategoryResult:
    result = CategoryResult("Spacing")
    raw = extract_single(css_text, SPACING_RE)
    if raw is None:
        return _warn_if_empty(result)
    result.found = 1
    base = parse_rem(raw)
    if base is None:
        result.skip("spacing", raw, "expected a rem value")
        return result
    for multiplier in SPACING_MULTIPLIERS:
        result.tokens[f"spacing-{format_multiplier(multiplier)}"] = number_token(rem_to_px(base * multiplier))
    result.tokens["spacing-px"] = number_token(1)
    return result


def _build_rem_tokens(css_text: str, *, category: str, prefix: str, pattern: Pattern[str],
                      exclude: Optional[Callable[[str], bool]] = None) -> CategoryResult:
    result = CategoryResult(category)
    variables = extract_vars(css_text, pattern)
    if exclude is not None:
        variables = {k: v for k, v in variables.items() if not exclude(k)}
    result.found = len(variables)
    for name, value in variables.items():
        rem = parse_rem(value)
        if rem is None:
            result.skip(name, value, "expected a rem value")
            continue
        result.tokens[f"{prefix}-{name}"] = number_token(rem_to_px(rem))
    return _warn_if_empty(result)


def build_radius_tokens(css_text: str) -> CategoryResult:
    return _build_rem_tokens(css_text, category="Radius", prefix="radius", pattern=RADIUS_RE)


def build_container_tokens(css_text: str) -> CategoryResult:
    return _build_rem_tokens(css_text, category="Container", prefix="container", pattern=CONTAINER_RE)


def build_breakpoint_tokens(css_text: str) -> CategoryResult:
    return _build_rem_tokens(css_text, category="Breakpoint", prefix="breakpoint", pattern=BREAKPOINT_RE)


def build_text_tokens(css_text: str) -> CategoryResult:
    # line-height companions belong to Leading
    return _build_rem_tokens(
        css_text,
        category="Text",
        prefix="text",
        pattern=TEXT_RE,
        exclude=lambda name: "--line-height" in name,
    )


def build_shadow_tokens(css_text: str) -> CategoryResult:
    result = CategoryResult("Shadow")
    variables = extract_shadow_vars(css_text)
    result.found = len(variables)
    for (family, size), value in variables.items():
        result.tokens[f"{family}-{size}"] = string_token(value)
    return _warn_if_empty(result)


def build_font_weight_tokens(css_text: str) -> CategoryResult:
    result = CategoryResult("Font Weight")
    variables = extract_vars(css_text, FONT_WEIGHT_RE)
    result.found = len(variables)
    for name, value in variables.items():
        weight = parse_int_prefix(value)
        if weight is None:
            result.skip(name, value, "expected an integer")
            continue
        result.tokens[f"font-weight-{name}"] = number_token(weight)
    return _warn_if_empty(result)


def build_tracking_tokens(css_text: str) -> CategoryResult:
    result = CategoryResult("Tracking")
    variables = extract_vars(css_text, TRACKING_RE)
    result.found = len(variables)
    for name, value in variables.items():
        result.tokens[f"tracking-{name}"] = string_token(value)
    return _warn_if_empty(result)


def build_leading_tokens(css_text: str) -> CategoryResult:
    result = CategoryResult("Leading")
    variables: Dict[str, str] = {}
    for name, value in extract_vars(css_text, LEADING_RE).items():
        variables[f"leading-{name}"] = value
    for size, value in extract_vars(css_text, TEXT_LINE_HEIGHT_RE).items():
        variables[f"text-{size}--line-height"] = value
    result.found = len(variables)
    for key, value in variables.items():
        evaluated = evaluate_calc(value)
        if evaluated is None:
            result.skip(key, value, "could not evaluate")
            continue
        result.tokens[key] = number_token(round_to(evaluated))
    return _warn_if_empty(result)
