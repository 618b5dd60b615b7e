"""Command line front-end for Roman numeral conversion.

Sub-commands:
- to-roman N: integer to canonical numeral
- to-number S: numeral to integer
- validate S...: grammar check, one line per input
- calc A OP B: arithmetic between two values (ints or numerals)

Library errors are reported as "Error: <message>" on stderr with exit status 2.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO

from pydantic import BaseModel

from src.core.domain.roman_number import RomanNumber
from src.core.numerals.conversion import to_number, to_roman
from src.core.numerals.validation import NumeralError, is_valid

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

OPERATORS: Dict[str, Callable[[RomanNumber, RomanNumber], RomanNumber]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "//": lambda a, b: a // b,
    "%": lambda a, b: a % b,
}


# =============================================================================
# CONFIG / RESULTS
# =============================================================================


@dataclass(frozen=True)
class CliConfig:
    """Presentation settings derived from command line flags."""

    json_output: bool = False
    indent: Optional[int] = None
    log_level: int = logging.WARNING


class ConversionResult(BaseModel):
    """A converted value in both representations."""

    number: int
    roman: str

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Outcome of a grammar check for one input."""

    value: str
    valid: bool

    model_config = {"frozen": True}


# =============================================================================
# COMMANDS
# =============================================================================


def parse_operand(text: str) -> RomanNumber:
    """Build a value from a decimal integer or a numeral string."""
    try:
        number = int(text)
    except ValueError:
        return RomanNumber(text)
    return RomanNumber(number)


def run_to_roman(args: argparse.Namespace, config: CliConfig, out: TextIO) -> int:
    roman = to_roman(args.number)
    _emit(ConversionResult(number=args.number, roman=roman), roman, config, out)
    return EXIT_OK


def run_to_number(args: argparse.Namespace, config: CliConfig, out: TextIO) -> int:
    number = to_number(args.roman)
    _emit(ConversionResult(number=number, roman=args.roman), str(number), config, out)
    return EXIT_OK


def run_validate(args: argparse.Namespace, config: CliConfig, out: TextIO) -> int:
    exit_code = EXIT_OK
    for value in args.values:
        valid = is_valid(value)
        if not valid:
            exit_code = EXIT_INVALID
        text = f"{value}\t{'valid' if valid else 'invalid'}"
        _emit(ValidationResult(value=value, valid=valid), text, config, out)
    return exit_code


def run_calc(args: argparse.Namespace, config: CliConfig, out: TextIO) -> int:
    left = parse_operand(args.left)
    right = parse_operand(args.right)
    result = OPERATORS[args.operator](left, right)
    logger.info("%s %s %s = %s", left, args.operator, right, result)
    _emit(
        ConversionResult(number=result.number, roman=result.roman),
        result.roman,
        config,
        out,
    )
    return EXIT_OK


def _emit(model: BaseModel, text: str, config: CliConfig, out: TextIO) -> None:
    if config.json_output:
        print(model.model_dump_json(indent=config.indent), file=out)
    else:
        print(text, file=out)


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="roman-numerals",
        description="Convert, validate and compute with Roman numerals (1-3999)",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log verbosity"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_roman_parser = subparsers.add_parser("to-roman", help="Integer to numeral")
    to_roman_parser.add_argument("number", type=int)
    to_roman_parser.set_defaults(handler=run_to_roman)

    to_number_parser = subparsers.add_parser("to-number", help="Numeral to integer")
    to_number_parser.add_argument("roman")
    to_number_parser.set_defaults(handler=run_to_number)

    validate_parser = subparsers.add_parser("validate", help="Check numeral strings")
    validate_parser.add_argument("values", nargs="+")
    validate_parser.set_defaults(handler=run_validate)

    calc_parser = subparsers.add_parser("calc", help="Arithmetic between two values")
    calc_parser.add_argument("left")
    calc_parser.add_argument("operator", choices=sorted(OPERATORS))
    calc_parser.add_argument("right")
    calc_parser.set_defaults(handler=run_calc)

    return parser


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    """Parse arguments, run the selected command and return the exit status."""
    args = build_parser().parse_args(argv)

    log_level = logging.WARNING
    if args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose >= 2:
        log_level = logging.DEBUG
    config = CliConfig(json_output=args.json, indent=args.indent, log_level=log_level)
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        return args.handler(args, config, out)
    except NumeralError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
