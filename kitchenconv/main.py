# kitchenconv CLI Entry Point
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .errors import ConversionError, UnknownNameError
from .parsing import has_enough_tokens, parse_arguments
from .services.unit_conversion import convert_request, list_substances, list_units
from .settings import Settings, get_settings

logger = logging.getLogger("kitchenconv")

USAGE_EXAMPLES = [
    "10 kg to lb",
    "400 F in C",
    "1 tbs butter to g",
    "3 ts of sugar to g",
    "3/4 cup to ml",
]


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="kitchenconv",
        description="Convert cooking measurements: <quantity> <unit> [substance] to <unit> [substance]",
        allow_abbrev=False,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("--list-units", action="store_true", help="print known units and exit")
    parser.add_argument("--list-substances", action="store_true", help="print known substances and exit")
    parser.add_argument("--query", default=None, help="filter for --list-substances")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool, level: str) -> None:
    level = "DEBUG" if verbose else level
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("kitchenconv").setLevel(level)


def print_usage() -> None:
    print("usage examples:")
    for example in USAGE_EXAMPLES:
        print(f"  kitchenconv {example}")


def print_units() -> None:
    for unit in list_units():
        print(f"  {unit.name:<6} {unit.category:<12} {unit.factor:g}")


def print_substances(query: Optional[str]) -> None:
    for substance in list_substances(query):
        print(f"  {substance.name:<14} {substance.density:g} kg/l")


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    opts, tokens = build_parser().parse_known_args(argv)
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            print(f"error: invalid configuration: {e}", file=sys.stderr)
            return 1
    configure_logging(opts.verbose, settings.log_level)

    if opts.list_units:
        print_units()
        return 0
    if opts.list_substances:
        print_substances(opts.query)
        return 0

    if not has_enough_tokens(tokens):
        print_usage()
        return 1

    try:
        args = parse_arguments(tokens)
        result = convert_request(args, settings.suggestion_limit)
    except UnknownNameError as e:
        print(f"{e.prefix}: {e}", file=sys.stderr)
        if e.suggestions:
            print(f"did you mean: {', '.join(e.suggestions)}", file=sys.stderr)
        return 1
    except ConversionError as e:
        logger.debug(f"Conversion failed: {e!r}")
        print(f"{e.prefix}: {e}", file=sys.stderr)
        return 1

    print(result.format(settings.result_digits))
    return 0
