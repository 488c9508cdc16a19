"""Assemble the design-token document and write it to disk."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple, Union

from themetokens.tokens.categories import (
    CategoryResult,
    build_breakpoint_tokens,
    build_color_tokens,
    build_container_tokens,
    build_font_weight_tokens,
    build_leading_tokens,
    build_radius_tokens,
    build_shadow_tokens,
    build_spacing_tokens,
    build_text_tokens,
    build_tracking_tokens,
)


logger = logging.getLogger(__name__)

BUILDERS: List[Tuple[str, Callable[[str], CategoryResult]]] = [
    ("Color", build_color_tokens),
    ("Spacing", build_spacing_tokens),
    ("Radius", build_radius_tokens),
    ("Shadow", build_shadow_tokens),
    ("Container", build_container_tokens),
    ("Breakpoint", build_breakpoint_tokens),
    ("Text", build_text_tokens),
    ("Font Weight", build_font_weight_tokens),
    ("Tracking", build_tracking_tokens),
    ("Leading", build_leading_tokens),
]

CATEGORY_ORDER = [name for name, _ in BUILDERS]


@dataclass
class TokenBuild:
    document: Dict[str, Dict[str, Any]]
    results: Dict[str, CategoryResult] = field(default_factory=dict)

    @property
    def token_count(self) -> int:
        return sum(len(tokens) for tokens in self.document.values())


def build_token_document(css_text: str) -> TokenBuild:
    """Run every category builder over `css_text`.

    All ten category keys are present even when a category is empty.
    """
    document: Dict[str, Dict[str, Any]] = {name: {} for name in CATEGORY_ORDER}
    build = TokenBuild(document=document)
    for name, builder in BUILDERS:
        result = builder(css_text)
        document[name] = result.tokens
        build.results[name] = result
    return build


def render_document(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def convert_theme(input_path: Union[str, Path], output_path: Union[str, Path]) -> TokenBuild:
    """Read a theme CSS file, build tokens and write them as JSON.

    OSError from reading or writing propagates; nothing is written if the
    input can't be read.
    """
    css_text = Path(input_path).read_text(encoding="utf-8")
    build = build_token_document(css_text)

    Path(output_path).write_text(render_document(build.document), encoding="utf-8")

    for name in CATEGORY_ORDER:
        result = build.results[name]
        logger.info("Converted %d %s tokens (%d skipped)", len(result.tokens), name, len(result.skipped))
    return build
