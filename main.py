# main.py - loop control demo: the flawed fill loop, then the corrected one
# (ISO/IEC 24772-1, Table 1 #12: never modify a loop control variable in the loop body)

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from loopguard.collector import DEFAULT_LENGTH, Cancelled, collect
from loopguard.flawed import collect_flawed
from loopguard.reporter import report

load_dotenv()

logger = logging.getLogger("loopguard")

FLAWED_HEADER = "Problematic example (demonstrates prohibited modification of loop control variable):"
CORRECTED_HEADER = "Corrected example (follows ISO/IEC 24772-1 recommendation):"


def _length(raw):
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid length: {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"length must be at least 1, got {value}")
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Flawed vs corrected input loop demo")
    parser.add_argument(
        "--length",
        type=_length,
        default=os.getenv("LOOPGUARD_LENGTH", str(DEFAULT_LENGTH)),
        help="Number of values to collect (default: 3)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOOPGUARD_LOG_LEVEL", "WARNING"),
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser.parse_args(argv)


def configure_logging(level_name):
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="[%(name)s] %(levelname)s: %(message)s",
    )


def run(length=DEFAULT_LENGTH, stdin=None, stdout=None):
    stdout = stdout or sys.stdout

    print(FLAWED_HEADER, file=stdout)
    report(collect_flawed(length, stdin, stdout), stdout)

    print(file=stdout)
    print(CORRECTED_HEADER, file=stdout)
    try:
        values = collect(length, stdin, stdout)
    except Cancelled as exc:
        logger.info("corrected example cancelled (%s)", exc.reason)
        print(f"Input cancelled: {exc}", file=stdout)
        return
    report(values, stdout)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)
    run(args.length)
    return 0


if __name__ == "__main__":
    sys.exit(main())
