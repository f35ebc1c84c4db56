import argparse
import logging
import sys
from pathlib import Path

from .api import format_text
from .config import load_config
from .query import plain_text
from .reverse import to_unicode

_PASS_FLAGS = (
    ("--no-unicode", "enable_unicode_conversion", "Keep Unicode super/subscript glyphs as they are"),
    ("--no-caret", "enable_caret_notation", "Disable ^ superscript notation"),
    ("--no-underscore", "enable_underscore_subscript", "Disable _ subscript notation"),
    ("--no-fractions", "enable_fractions", "Disable A/B fraction notation"),
    ("--no-chemical", "enable_chemical_formulas", "Disable chemical formula subscripts (H2O)"),
)


def _read_input(text: str | None) -> str:
    """Return *text*, or all of stdin when *text* is omitted or ``-``."""
    if text is None or text == "-":
        return sys.stdin.read()
    return text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmpnotation",
        description="Convert plain-text scientific notation to rich-text tags and back",
    )
    parser.add_argument(
        "text", nargs="?", default=None, help="Text to convert (default: read stdin)"
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=("format", "unicode", "plain"),
        default="format",
        help="format: notation → tags; unicode: tags → glyphs; plain: strip tags "
             "(default: format)",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to config.yaml (optional)"
    )
    for flag, _, help_text in _PASS_FLAGS:
        parser.add_argument(flag, action="store_true", help=help_text)
    parser.add_argument("--superscript-size", type=float, default=None, metavar="PCT")
    parser.add_argument("--subscript-size", type=float, default=None, metavar="PCT")
    parser.add_argument("--fraction-size", type=float, default=None, metavar="PCT")
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Write result to this file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: read text, convert it, and print or write the result."""
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    if args.config is not None and not args.config.exists():
        print(f"Error: '{args.config}' not found.", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
        text = _read_input(args.text)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    for flag, attr, _ in _PASS_FLAGS:
        if getattr(args, flag[2:].replace("-", "_")):
            setattr(config, attr, False)
    for attr in ("superscript_size", "subscript_size", "fraction_size"):
        value = getattr(args, attr)
        if value is not None:
            setattr(config, attr, value)

    if args.mode == "unicode":
        result = to_unicode(text)
    elif args.mode == "plain":
        result = plain_text(text)
    else:
        result = format_text(text, config)

    if args.output is not None:
        args.output.write_text(result, encoding="utf-8")
        print(f"Written → {args.output}")
    else:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")


if __name__ == "__main__":
    main()
