"""CLI entrypoint for mdlink."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .inputs import InputError, read_input
from .logging import configure_logging, get_logger
from .pipeline import convert
from .renderers import RenderError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlink",
        description=(
            "Transform a URL, JIRA key, GitHub issue title or phone number into a "
            "Markdown link. Reads TEXT, piped stdin, or the clipboard."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log detections and votes to stderr.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.yaml (defaults to ~/.config/mdlink/config.yaml).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert; joined with spaces when given as several arguments.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mdlink."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"mdlink: failed to load config: {exc}\n")

    if args.text:
        raw = " ".join(args.text)
    else:
        try:
            raw = read_input()
        except InputError as exc:
            parser.exit(1, f"mdlink: failed to read input: {exc}\n")

    text = raw.strip()
    if not text:
        logger.debug("Empty input; nothing to convert")
        return

    try:
        output = convert(text, config)
    except RenderError as exc:
        parser.exit(1, f"mdlink: failed to render output: {exc}\n")

    print(output, end="")


if __name__ == "__main__":
    main(sys.argv[1:])
