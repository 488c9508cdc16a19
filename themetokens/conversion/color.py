"""Color conversion: OKLCH -> hex, hex -> normalized sRGB components.

OKLCH math follows Björn Ottosson's OKLab reference matrices:
  oklch -> oklab (a = C cos h, b = C sin h) -> LMS (cubed) -> linear sRGB -> sRGB
Out-of-gamut channels are clamped to [0, 1] before formatting as hex.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

from themetokens.conversion.units import round_to


HEX_RE = re.compile(r"^#(?P<digits>[0-9a-fA-F]+)$")
OKLCH_RE = re.compile(r"^oklch\(\s*(?P<body>[^()]*?)\s*\)$", re.I)
NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# CSS Color 4: 100% chroma in oklch() is 0.4
OKLCH_CHROMA_PERCENT_REF = 0.4

HUE_UNITS = {
    "": 1.0,
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}


def _clamp01(v: float) -> float:
    return 0.0 if v < 0.0 else 1.0 if v > 1.0 else v


def _srgb_encode(linear: float) -> float:
    sign = -1.0 if linear < 0 else 1.0
    a = abs(linear)
    if a <= 0.0031308:
        return linear * 12.92
    return sign * (1.055 * (a ** (1.0 / 2.4)) - 0.055)


def _to_byte(channel: float) -> int:
    return int(math.floor(channel * 255 + 0.5))


def _split_number(token: str) -> Optional[Tuple[float, str]]:
    m = NUMBER_RE.match(token)
    if not m:
        return None
    return float(m.group(0)), token[m.end():].lower()


def _parse_lightness(token: str) -> Optional[float]:
    if token.lower() == "none":
        return 0.0
    parsed = _split_number(token)
    if not parsed:
        return None
    num, unit = parsed
    if unit == "%":
        return num / 100.0
    if unit:
        return None
    return num


def _parse_chroma(token: str) -> Optional[float]:
    if token.lower() == "none":
        return 0.0
    parsed = _split_number(token)
    if not parsed:
        return None
    num, unit = parsed
    if unit == "%":
        return num / 100.0 * OKLCH_CHROMA_PERCENT_REF
    if unit:
        return None
    return num


def _parse_hue(token: str) -> Optional[float]:
    if token.lower() == "none":
        return 0.0
    parsed = _split_number(token)
    if not parsed:
        return None
    num, unit = parsed
    scale = HUE_UNITS.get(unit)
    if scale is None:
        return None
    return num * scale


def _parse_alpha(token: str) -> bool:
    if token.lower() == "none":
        return True
    parsed = _split_number(token)
    return bool(parsed) and parsed[1] in ("", "%")


def parse_oklch(value: str) -> Optional[Tuple[float, float, float]]:
    """Parse `oklch(L C H [/ A])` into (L, C, H degrees); alpha is validated then dropped."""
    m = OKLCH_RE.match((value or "").strip())
    if not m:
        return None
    body = m.group("body")
    alpha = None
    if "/" in body:
        body, alpha = body.split("/", 1)
        alpha = alpha.strip()
        if not alpha or not _parse_alpha(alpha):
            return None
    tokens = body.split()
    if len(tokens) != 3:
        return None
    L = _parse_lightness(tokens[0])
    C = _parse_chroma(tokens[1])
    H = _parse_hue(tokens[2])
    if L is None or C is None or H is None:
        return None
    return L, C, H


def oklch_to_srgb(L: float, C: float, H: float) -> Tuple[float, float, float]:
    hr = math.radians(H)
    a_ = C * math.cos(hr)
    b_ = C * math.sin(hr)

    l_ = L + 0.3963377774 * a_ + 0.2158037573 * b_
    m_ = L - 0.1055613458 * a_ - 0.0638541728 * b_
    s_ = L - 0.0894841775 * a_ - 1.2914855480 * b_

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    r_lin = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g_lin = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    b_lin = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return (
        _clamp01(_srgb_encode(r_lin)),
        _clamp01(_srgb_encode(g_lin)),
        _clamp01(_srgb_encode(b_lin)),
    )


def oklch_to_hex(value: str) -> Optional[str]:
    """Convert an `oklch(...)` CSS value into `#rrggbb`, or None when unparsable."""
    parsed = parse_oklch(value)
    if parsed is None:
        return None
    r, g, b = oklch_to_srgb(*parsed)
    return "#{:02x}{:02x}{:02x}".format(_to_byte(r), _to_byte(g), _to_byte(b))


def _hex_digits(hex_value: str) -> Optional[str]:
    m = HEX_RE.match((hex_value or "").strip())
    if not m:
        return None
    digits = m.group("digits")
    if len(digits) == 3:
        return "".join(ch * 2 for ch in digits)
    if len(digits) in (6, 8):
        return digits[:6]
    return None


def is_hex_color(value: str) -> bool:
    return _hex_digits(value) is not None


def hex_to_components(hex_value: str) -> Tuple[float, float, float]:
    """`#rgb` / `#rrggbb` -> (r, g, b) in [0, 1], rounded to 3 decimals."""
    digits = _hex_digits(hex_value)
    if digits is None:
        raise ValueError(f"invalid hex color: {hex_value!r}")
    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255
    return round_to(r), round_to(g), round_to(b)


def resolve_color_hex(value: str) -> Optional[str]:
    """Map a raw theme color value to a hex string, or None if it can't be converted."""
    v = (value or "").strip()
    if v.startswith("#"):
        return v if is_hex_color(v) else None
    if v.startswith("oklch("):
        return oklch_to_hex(v)
    return None
