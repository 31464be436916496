from __future__ import annotations

import sys
from typing import Optional, TextIO


def read_line(stream: Optional[TextIO] = None) -> Optional[str]:
    """Read one line, or None once the stream is exhausted."""
    line = (stream or sys.stdin).readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def say(stream: Optional[TextIO] = None, text: str = "") -> None:
    print(text, file=stream or sys.stdout, flush=True)
