#!/usr/bin/env python3
"""
Export a Tailwind-style `@theme` CSS file into design-token JSON for Figma.

Outputs:
  - one JSON document with ten categories (Color, Spacing, Radius, Shadow,
    Container, Breakpoint, Text, Font Weight, Tracking, Leading)

Notes:
  - Colors are converted from oklch()/hex to sRGB components + hex.
  - rem lengths are converted to px at a 16px root.
  - Line heights written as calc(a / b) are evaluated.
  - Variables that can't be converted are logged and skipped.

Configuration (flags override environment, .env is loaded first):
  THEME_INPUT      input CSS path (default: input.css)
  THEME_OUTPUT     output JSON path (default: output.json)
  THEME_LOG_LEVEL  logging level (default: INFO)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from themetokens.contracts.token_document import validate_token_document
from themetokens.tokens.document import convert_theme


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--env", default=None)
    known, _ = pre.parse_known_args(argv)
    if known.env:
        load_dotenv(known.env)
    else:
        load_dotenv()

    parser = argparse.ArgumentParser(description="Convert a CSS @theme file into design-token JSON")
    parser.add_argument("--env", default=None, help="Path to .env file")
    parser.add_argument("--input", default=os.environ.get("THEME_INPUT", "input.css"), help="Theme CSS file")
    parser.add_argument("--output", default=os.environ.get("THEME_OUTPUT", "output.json"), help="Token JSON file")
    parser.add_argument("--check", action="store_true", help="Validate the produced document shape")
    parser.add_argument("--log-level", default=os.environ.get("THEME_LOG_LEVEL", "INFO"), help="Logging level")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        build = convert_theme(args.input, args.output)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.check:
        errors = validate_token_document(build.document)
        if errors:
            print("Error: token document failed validation:\n" + "\n".join(errors), file=sys.stderr)
            return 1

    print(f"Converted {build.token_count} tokens")
    print(f"Wrote: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
