"""Watch a local variable of a running function through ``sys.settrace``.

Used to check, at run time, that a fill index only ever steps forward by one.
Only frames of the watched function are traced; every other call is left alone.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Any, Callable, Iterator


class LocalWriteRecorder:
    def __init__(self, func: Callable[..., Any], name: str):
        self.code = func.__code__
        self.name = name
        self.values: list[Any] = []

    def _trace_calls(self, frame, event, arg):
        if event == "call" and frame.f_code is self.code:
            return self._trace_lines
        return None

    def _trace_lines(self, frame, event, arg):
        if event in ("line", "return"):
            self._observe(frame.f_locals)
        return self._trace_lines

    def _observe(self, local_vars) -> None:
        if self.name not in local_vars:
            return
        value = local_vars[self.name]
        if not self.values or self.values[-1] != value:
            self.values.append(value)

    @property
    def decrements(self) -> int:
        return sum(1 for prev, cur in zip(self.values, self.values[1:]) if cur < prev)

    def is_single_step(self) -> bool:
        return self.values == list(range(len(self.values)))


@contextmanager
def record_local_writes(func: Callable[..., Any], name: str) -> Iterator[LocalWriteRecorder]:
    recorder = LocalWriteRecorder(func, name)
    previous = sys.gettrace()
    sys.settrace(recorder._trace_calls)
    try:
        yield recorder
    finally:
        sys.settrace(previous)
