"""Counter-example: a fill loop that rewinds its own index on bad input.

Kept for the demo and for the tests that contrast it with ``loopguard.collector``.
Do not copy this pattern.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from loopguard.console import read_line, say

logger = logging.getLogger(__name__)

PROMPT = "Give the value:"
UNSAFE_NOTICE = "Conversion failed - modifying loop control variable (unsafe)."


def collect_flawed(
    length: int = 3,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> list[int]:
    matrix = [0] * length
    index = 0
    say(stdout, f"Matrix length: {len(matrix)}")

    while index < len(matrix):
        say(stdout, PROMPT)
        raw = read_line(stdin)
        try:
            # end of stream leaves the slot at zero
            matrix[index] = int(raw) if raw is not None else 0
        except ValueError:
            say(stdout, UNSAFE_NOTICE)
            logger.debug("rewinding index from %d", index)
            index -= 1
        index += 1

    return matrix
