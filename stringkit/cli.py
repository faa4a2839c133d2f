"""Command-line interface for stringkit.

WHY: The string functions are handy in shell pipelines and scripts
(slugging a title for a file name, wrapping a commit message, checking how
close two identifiers are) without writing any Python.

HOW: argparse with one sub-command per task. Text comes from the
positional argument, or from stdin when the argument is "-". Each
sub-command calls the library function and prints the result.

RULES:
- Usage: python -m stringkit <command> [options]
- Exit codes: 0 = success, 1 = error
- Results go to stdout; errors go to stderr as "Error: ..."
- template --vars must be a JSON object of scalar/null values; it is
  validated with jsonschema before rendering
- Defaults for --width and --locale come from stringkit.config
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import jsonschema

from stringkit import (
    UnsupportedEnvironmentError,
    __version__,
    humanize_list,
    levenshtein,
    similarity,
    slugify,
    template,
    to_camel_case,
    to_constant_case,
    to_kebab_case,
    to_pascal_case,
    to_sentence_case,
    to_snake_case,
    to_title_case,
    word_wrap,
)
from stringkit.capabilities import LIST_KINDS
from stringkit.config import DEFAULT_LOCALE, DEFAULT_WRAP_WIDTH, load_log_level

logger = logging.getLogger(__name__)

CASE_CONVERTERS = {
    "camel": to_camel_case,
    "pascal": to_pascal_case,
    "snake": to_snake_case,
    "kebab": to_kebab_case,
    "constant": to_constant_case,
    "title": to_title_case,
    "sentence": to_sentence_case,
}

TEMPLATE_VARS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "additionalProperties": {"type": ["string", "number", "boolean", "null"]},
}


def _read_text(value: str) -> str:
    """Return value, or all of stdin when value is "-" (trailing newline dropped)."""
    if value == "-":
        data = sys.stdin.read()
        return data[:-1] if data.endswith("\n") else data
    return value


def load_template_vars(path: str) -> Dict[str, Any]:
    """Load and validate a template variables file.

    Args:
        path: Path to a JSON file.

    Returns:
        The variables mapping.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        jsonschema.ValidationError: If it is not an object of scalar values.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    jsonschema.validate(instance=data, schema=TEMPLATE_VARS_SCHEMA)
    return data


def _cmd_slugify(args: argparse.Namespace) -> str:
    return slugify(_read_text(args.text), lower=not args.keep_case, separator=args.separator)


def _cmd_case(args: argparse.Namespace) -> str:
    return CASE_CONVERTERS[args.to](_read_text(args.text))


def _cmd_wrap(args: argparse.Namespace) -> str:
    return word_wrap(
        _read_text(args.text),
        width=args.width,
        break_long_words=args.break_long_words,
        indent=args.indent,
    )


def _cmd_distance(args: argparse.Namespace) -> str:
    if args.similarity:
        return "{:.4f}".format(similarity(args.a, args.b))
    return str(levenshtein(args.a, args.b))


def _cmd_template(args: argparse.Namespace) -> str:
    variables = load_template_vars(args.vars)
    return template(_read_text(args.text), variables, strict=args.strict)


def _cmd_list(args: argparse.Namespace) -> str:
    return humanize_list(args.items, locale=args.locale, kind=args.kind)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stringkit", description="Pure string utilities")
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("slugify", help="Make a URL-friendly slug")
    p.add_argument("text", help='Input text, or "-" for stdin')
    p.add_argument("--separator", default="-", help="Separator between words")
    p.add_argument("--keep-case", action="store_true", help="Do not lowercase")
    p.set_defaults(handler=_cmd_slugify)

    p = subparsers.add_parser("case", help="Convert between naming conventions")
    p.add_argument("text", help='Input text, or "-" for stdin')
    p.add_argument("--to", required=True, choices=sorted(CASE_CONVERTERS))
    p.set_defaults(handler=_cmd_case)

    p = subparsers.add_parser("wrap", help="Wrap text to a column width")
    p.add_argument("text", help='Input text, or "-" for stdin')
    p.add_argument("--width", type=int, default=DEFAULT_WRAP_WIDTH)
    p.add_argument("--break-long-words", action="store_true")
    p.add_argument("--indent", default="")
    p.set_defaults(handler=_cmd_wrap)

    p = subparsers.add_parser("distance", help="Levenshtein distance between two strings")
    p.add_argument("a")
    p.add_argument("b")
    p.add_argument("--similarity", action="store_true", help="Print the 0..1 similarity instead")
    p.set_defaults(handler=_cmd_distance)

    p = subparsers.add_parser("template", help="Fill {placeholders} from a JSON file")
    p.add_argument("text", help='Template text, or "-" for stdin')
    p.add_argument("--vars", required=True, help="JSON object with the variables")
    p.add_argument("--strict", action="store_true", help="Blank out unknown placeholders")
    p.set_defaults(handler=_cmd_template)

    p = subparsers.add_parser("list", help="Join items into a readable list")
    p.add_argument("items", nargs="+")
    p.add_argument("--locale", default=DEFAULT_LOCALE)
    p.add_argument("--kind", default="conjunction", choices=LIST_KINDS)
    p.set_defaults(handler=_cmd_list)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    logging.basicConfig(
        level=load_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    args = build_parser().parse_args(argv)
    logger.debug("Running command %s", args.command)

    try:
        result = args.handler(args)
    except jsonschema.ValidationError as e:
        print("Error: invalid template variables: {}".format(e.message), file=sys.stderr)
        return 1
    except (OSError, ValueError, UnsupportedEnvironmentError) as e:
        # json.JSONDecodeError is a ValueError.
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
