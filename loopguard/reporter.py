from __future__ import annotations

from typing import Optional, Sequence, TextIO

from loopguard.console import say


def report(values: Sequence[int], stdout: Optional[TextIO] = None) -> None:
    for index, value in enumerate(values):
        say(stdout, f"The value in {index} is {value}.")
