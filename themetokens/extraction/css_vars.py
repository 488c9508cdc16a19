"""Regex extraction of CSS custom properties from a theme file.

This is deliberately not a CSS parser: each token category owns one pattern
and we scan the whole text with it. Later declarations of the same name win.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Pattern, Tuple


COLOR_RE = re.compile(r"--color-([a-z0-9-]+):\s*([^;]+);")
SPACING_RE = re.compile(r"--spacing:\s*([^;]+);")
RADIUS_RE = re.compile(r"--radius-([a-z0-9]+):\s*([^;]+);")
CONTAINER_RE = re.compile(r"--container-([a-z0-9]+):\s*([^;]+);")
BREAKPOINT_RE = re.compile(r"--breakpoint-([a-z0-9]+):\s*([^;]+);")
TEXT_RE = re.compile(r"--text-([a-z0-9]+):\s*([^;]+);")
SHADOW_RE = re.compile(r"--((?:inset-|drop-|text-)?shadow)-([a-z0-9]+):\s*([^;]+);")
FONT_WEIGHT_RE = re.compile(r"--font-weight-([a-z]+):\s*([^;]+);")
TRACKING_RE = re.compile(r"--tracking-([a-z]+):\s*([^;]+);")
LEADING_RE = re.compile(r"--leading-([a-z]+):\s*([^;]+);")
TEXT_LINE_HEIGHT_RE = re.compile(r"--text-([a-z0-9]+)--line-height:\s*([^;]+);")


def extract_vars(css_text: str, pattern: Pattern[str]) -> Dict[str, str]:
    """name -> trimmed value for every (name, value) match of `pattern`."""
    out: Dict[str, str] = {}
    for m in pattern.finditer(css_text or ""):
        out[m.group(1)] = m.group(2).strip()
    return out


def extract_shadow_vars(css_text: str) -> Dict[Tuple[str, str], str]:
    """(family, size) -> trimmed value, e.g. ("inset-shadow", "xs")."""
    out: Dict[Tuple[str, str], str] = {}
    for m in SHADOW_RE.finditer(css_text or ""):
        out[(m.group(1), m.group(2))] = m.group(3).strip()
    return out


def extract_single(css_text: str, pattern: Pattern[str]) -> Optional[str]:
    # first declaration only (used for the `--spacing` base)
    m = pattern.search(css_text or "")
    if not m:
        return None
    return m.group(1).strip()
