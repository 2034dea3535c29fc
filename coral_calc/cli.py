# cli.py
"""
Entry point: evaluates a single expression given as an argument, or starts the REPL
when no expression is given.

Exit statuses: 0 on success, 1 for any calculation or usage error, 69 for 0 / 0.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import Settings, load_settings
from .console import ISSUE_HINT, print_error, print_notice, show_help, show_licence
from .errors import CalculatorError, ZeroOverZero
from .numeric import format_number
from .repl import REPL
from .session import Session

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coral-calc",
        description="Minimal terminal calculator. Separate every token with a space.",
        epilog="Run without an expression to start the interactive mode.",
        allow_abbrev=False,
    )
    parser.add_argument("expression", nargs="?", help='expression to evaluate, e.g. "5 * (5 + 5)"')
    parser.add_argument("--version", action="store_true", help="print the version and exit")
    parser.add_argument("--licence", "--license", dest="licence", action="store_true",
                        help="print the licence notice and exit")
    return parser


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def run_single(expression: str, settings: Settings) -> int:
    """Evaluate one expression, print the result and return the exit status."""
    try:
        result = Session().calculate(expression)
    except CalculatorError as e:
        print_error(str(e), settings.color)
        print_notice(ISSUE_HINT, settings.color, sys.stderr)
        return EXIT_ERROR
    except RecursionError:
        logger.error("Expression nested too deeply: %d characters", len(expression))
        print_error("Expression is nested too deeply", settings.color)
        return EXIT_ERROR
    print(format_number(result))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    # Unknown "options" are expressions that start with '-', such as "-pi".
    args, extra = parser.parse_known_args(argv)
    expressions = ([args.expression] if args.expression is not None else []) + extra

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR
    configure_logging(settings)

    if args.version:
        print_notice(__version__, settings.color)
        return EXIT_OK
    if args.licence:
        print_notice(show_licence(), settings.color)
        return EXIT_OK
    if len(expressions) > 1:
        print_error("Too many arguments!", settings.color)
        return EXIT_ERROR

    try:
        if expressions:
            if expressions[0] == "help":
                print(show_help())
                return EXIT_OK
            return run_single(expressions[0], settings)
        return REPL(settings).repl_loop()
    except ZeroOverZero as e:
        print_error(e.detail, settings.color)
        print_notice(ZeroOverZero.message, settings.color)
        return ZeroOverZero.exit_code


if __name__ == "__main__":
    sys.exit(main())
