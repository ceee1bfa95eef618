from __future__ import annotations

import logging
import re
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace, RawDescriptionHelpFormatter
from dataclasses import dataclass

from .constants import (
    DEFAULT_LOWER,
    DEFAULT_UPPER,
    EXIT_CLEAN,
    EXIT_USAGE,
    INT_MAX,
    PROGRAM_NAME,
    PROGRAM_VERSION,
    ULONG_MAX,
)
from .exception import LimitParseError
from .policy import STDIN_LABEL, Thresholds, Verdict, evaluate, update_tally
from .scanner import count_zero_bytes

logger = logging.getLogger(__name__)

DESCRIPTION = "zcount -- A program for counting zero bytes in given files."

EPILOG = (
    "Principal use of this program is to detect corrupt files: Lost data chunks "
    "are usually replaced by zero-bytes (0x00) by the filesystem checkers. Thus, "
    "corrupted files are easily identified by a large number of zero-bytes.\n\n"
    "If no input files are given on the command line, then stdin is used. The "
    "return code of the program is the number of files containing at least "
    "NUMBER2 zero-bytes (or INT_MAX). WARNING: By default no output is produced, "
    "as the program is intended to be used in a script. Set at least one '-v' "
    "for human readable output."
)

# strtoul(3) with base 0, minus the sign handling: hex, octal or decimal
_LIMIT_RE = re.compile(r"[ \t\n\v\f\r]*\+?(?:(0[xX][0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))")


def parse_limit(token: str) -> int:
    """Parse a non-negative integer the way ``strtoul(token, &end, 0)`` would.

    Values too large for an unsigned long saturate at ``ULONG_MAX``.
    """
    match = _LIMIT_RE.fullmatch(token)
    if match is None:
        raise LimitParseError(token)
    hexadecimal, octal, decimal = match.groups()
    if hexadecimal is not None:
        value = int(hexadecimal, 16)
    elif octal is not None:
        value = int(octal, 8)
    else:
        value = int(decimal, 10)
    return min(value, ULONG_MAX)


def _limit_type(token: str) -> int:
    try:
        return parse_limit(token)
    except LimitParseError as e:
        raise ArgumentTypeError(str(e)) from e


class ZcountArgumentParser(ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(
            EXIT_USAGE,
            f"{self.prog}: {message}\nArgument parsing has been terminated due to an error!\n",
        )


def _create_parser() -> ArgumentParser:
    parser = ZcountArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [OPTION...] [FILE1] [FILE2] ...",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="files to scan (default is to read STDIN)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Produce verbose output, multiple flags allowed",
    )
    parser.add_argument(
        "--upper",
        "-u",
        metavar="NUMBER1",
        type=_limit_type,
        default=DEFAULT_UPPER,
        help="Stop after counting NUMBER1 (long unsigned integer) of zero-bytes "
        "(NUMBER1=0 [default] for no limit)",
    )
    parser.add_argument(
        "--lower",
        "-l",
        metavar="NUMBER2",
        type=_limit_type,
        default=DEFAULT_LOWER,
        help="Consider a file damaged after counting at least NUMBER2 of zero-bytes "
        "(if NUMBER2 > NUMBER1 then NUMBER1 is used for both limits, default is NUMBER2=1)",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"{PROGRAM_NAME} {PROGRAM_VERSION}",
        help="print program version",
    )
    return parser


@dataclass(frozen=True)
class Options:
    thresholds: Thresholds
    verbosity: int

    @classmethod
    def from_args(cls, args: Namespace) -> Options:
        thresholds = Thresholds(upper=args.upper, lower=args.lower).clamped()
        return cls(thresholds=thresholds, verbosity=min(args.verbose, INT_MAX))


def process_file(path: str, options: Options) -> Verdict | None:
    """Scan and report one file; returns ``None`` if it could not be opened."""
    try:
        file = open(path, "rb")
    except OSError as e:
        sys.stderr.write(f"{path}: {e.strerror or e}\n")
        return None
    with file:
        zeros = count_zero_bytes(file, options.thresholds.upper)
    return evaluate(zeros, options.thresholds, options.verbosity, path)


def process_stdin(options: Options) -> Verdict:
    if hasattr(sys.stdin, "buffer") and sys.stdin.buffer is not None:
        stream = sys.stdin.buffer
    else:
        stream = sys.stdin
    zeros = count_zero_bytes(stream, options.thresholds.upper)
    return evaluate(zeros, options.thresholds, options.verbosity, STDIN_LABEL, is_stdin=True)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv

    parser = _create_parser()
    args = parser.parse_intermixed_args(argv[1:])
    options = Options.from_args(args)
    logger.debug("options: %s", options)

    tally = EXIT_CLEAN
    if not args.files:
        tally = update_tally(tally, process_stdin(options))
    for path in args.files:
        verdict = process_file(path, options)
        if verdict is not None:
            tally = update_tally(tally, verdict)

    return tally
