"""Command-line entry point: render a documentation comment to Markdown."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from doc2md.config import DOC2MD_LOG_LEVEL
from doc2md.conversion import render_comment_json, render_comment_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render a documentation comment (JSON tree or raw text) as Markdown."
    )
    parser.add_argument("file", nargs="?", help="Input file (defaults to stdin)")
    parser.add_argument(
        "--text",
        action="store_true",
        help="Treat the input as raw comment text instead of a JSON comment tree",
    )
    parser.add_argument("--log-level", default=DOC2MD_LOG_LEVEL, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    source = load_input(args.file)
    if args.text:
        print(render_comment_text(source))
        return 0

    try:
        print(render_comment_json(source))
    except ValidationError as exc:
        print(f"Invalid documentation comment: {exc}", file=sys.stderr)
        return 2
    return 0


def load_input(file_path: str | None) -> str:
    if not file_path or file_path == "-":
        return sys.stdin.read()
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    sys.exit(main())
