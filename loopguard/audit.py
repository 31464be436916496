"""Static check for loops that write their own control variable.

A ``for`` loop must not assign its target inside the body at all. A ``while`` loop
may advance a variable from its test in one place, but a second write site (the
classic ``i -= 1`` retry) is reported.
"""

from __future__ import annotations

import ast
import inspect
import textwrap
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Iterator


@dataclass(frozen=True)
class LoopControlWrite:
    name: str
    lineno: int
    loop_lineno: int
    loop_kind: str

    def describe(self, path: str = "<source>") -> str:
        return (
            f"{path}:{self.lineno}: loop control variable '{self.name}' "
            f"modified inside {self.loop_kind} loop at line {self.loop_lineno}"
        )


_SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda, ast.ClassDef)


def _target_names(target: ast.AST) -> Iterator[str]:
    # items[i] = x stores into items, not into i
    for node in ast.walk(target):
        if isinstance(node, ast.Name) and isinstance(node.ctx, (ast.Store, ast.Del)):
            yield node.id


def _walk_body(statements: list[ast.stmt]) -> Iterator[ast.AST]:
    # nested functions and classes run in their own scope
    stack: list[ast.AST] = list(reversed(statements))
    while stack:
        node = stack.pop()
        if isinstance(node, _SCOPE_NODES):
            continue
        yield node
        stack.extend(reversed(list(ast.iter_child_nodes(node))))


def _writes(statements: list[ast.stmt]) -> Iterator[tuple[str, int]]:
    for node in _walk_body(statements):
        if isinstance(node, ast.Assign):
            for target in node.targets:
                for name in _target_names(target):
                    yield name, node.lineno
        elif isinstance(node, ast.AugAssign):
            for name in _target_names(node.target):
                yield name, node.lineno
        elif isinstance(node, ast.AnnAssign) and node.value is not None:
            for name in _target_names(node.target):
                yield name, node.lineno
        elif isinstance(node, (ast.For, ast.AsyncFor)):
            for name in _target_names(node.target):
                yield name, node.lineno
        elif isinstance(node, ast.NamedExpr):
            yield node.target.id, node.lineno
        elif isinstance(node, ast.Delete):
            for target in node.targets:
                for name in _target_names(target):
                    yield name, node.lineno


def _check_for(loop: ast.For | ast.AsyncFor) -> Iterator[LoopControlWrite]:
    controls = set(_target_names(loop.target))
    for name, lineno in _writes(loop.body):
        if name in controls:
            yield LoopControlWrite(name, lineno, loop.lineno, "for")


def _check_while(loop: ast.While) -> Iterator[LoopControlWrite]:
    controls = {
        node.id
        for node in ast.walk(loop.test)
        if isinstance(node, ast.Name) and isinstance(node.ctx, ast.Load)
    }
    sites: dict[str, list[int]] = defaultdict(list)
    for name, lineno in _writes(loop.body):
        if name in controls:
            sites[name].append(lineno)
    for name, lines in sites.items():
        if len(lines) > 1:
            for lineno in lines:
                yield LoopControlWrite(name, lineno, loop.lineno, "while")


def find_loop_control_writes(source: str) -> list[LoopControlWrite]:
    tree = ast.parse(source)
    found: list[LoopControlWrite] = []
    for node in ast.walk(tree):
        if isinstance(node, (ast.For, ast.AsyncFor)):
            found.extend(_check_for(node))
        elif isinstance(node, ast.While):
            found.extend(_check_while(node))
    return sorted(found, key=lambda item: (item.lineno, item.name))


def audit_function(func: Callable[..., Any]) -> list[LoopControlWrite]:
    """Run the check on one function; line numbers are relative to its ``def``."""
    return find_loop_control_writes(textwrap.dedent(inspect.getsource(func)))
