"""Corrected input collection.

Each slot gets its own retry loop, so the fill index is only ever advanced by the
``for`` statement itself. Invalid lines are retried in place and cancellation is
raised rather than returned.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, TextIO

from loopguard.console import read_line, say

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 3

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

CANCEL_TOKENS = ("quit", "cancel")

END_OF_INPUT = "end of input"
USER_REQUESTED = "user requested"

PROMPT = "Give the value (or type 'quit' to cancel):"
EOF_NOTICE = "No input (end-of-stream) detected - cancelling."
EMPTY_NOTICE = "Empty input - please enter a number or type 'quit' to cancel."
RETRY_NOTICE = "Conversion failed - please try again or type 'quit' to cancel."

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_CANCEL_MESSAGES = {
    END_OF_INPUT: "End of input stream.",
    USER_REQUESTED: "User requested cancellation.",
}


class Cancelled(Exception):
    """Raised when the user gives up or the input runs dry."""

    def __init__(self, reason: str):
        super().__init__(_CANCEL_MESSAGES.get(reason, reason))
        self.reason = reason


def parse_int(text: str) -> Optional[int]:
    """Parse a plain base-10 integer that fits in 32 signed bits.

    Python's ``int()`` also takes underscores and non-ASCII digits, which are not
    accepted here.
    """
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def is_cancel_token(text: str) -> bool:
    return text.lower() in CANCEL_TOKENS


def collect(
    length: int = DEFAULT_LENGTH,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> list[int]:
    values = [0] * length

    for index in range(length):
        while True:
            say(stdout, PROMPT)
            raw = read_line(stdin)

            if raw is None:
                say(stdout, EOF_NOTICE)
                logger.debug("end of stream while filling slot %d", index)
                raise Cancelled(END_OF_INPUT)

            text = raw.strip()

            if is_cancel_token(text):
                logger.debug("cancel token %r at slot %d", text, index)
                raise Cancelled(USER_REQUESTED)

            if not text:
                say(stdout, EMPTY_NOTICE)
                logger.debug("empty line at slot %d", index)
                continue

            value = parse_int(text)
            if value is not None:
                values[index] = value
                logger.debug("slot %d = %d", index, value)
                break

            say(stdout, RETRY_NOTICE)
            logger.debug("rejected %r at slot %d", text, index)

    return values
