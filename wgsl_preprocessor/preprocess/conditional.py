"""Conditional-compilation stack (ifdef / ifndef / else / endif)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from wgsl_preprocessor.errors import UnbalancedConditional, UnterminatedConditional
from wgsl_preprocessor.preprocess.macros import MacroTable


@dataclass
class Guard:
    name: str
    must_be_defined: bool


class ConditionalStack:
    """
    Stack of guards of the currently open conditional blocks.

    A line is relevant when every guard holds against the current state of
    the macro table. The table is consulted on every query, so a define or
    undef inside an outer block affects guards pushed before it.
    """

    def __init__(self):
        self._guards: List[Guard] = []

    def push(self, name: str, must_be_defined: bool) -> None:
        self._guards.append(Guard(name, must_be_defined))

    def flip(self, path: str | None = None, line_number: int | None = None) -> None:
        """Switch the innermost block to its else branch."""
        if not self._guards:
            raise UnbalancedConditional("else", path, line_number)
        top = self._guards[-1]
        top.must_be_defined = not top.must_be_defined

    def pop(self, path: str | None = None, line_number: int | None = None) -> Guard:
        if not self._guards:
            raise UnbalancedConditional("endif", path, line_number)
        return self._guards.pop()

    def is_relevant(self, macros: MacroTable) -> bool:
        return all(macros.is_defined(g.name) == g.must_be_defined for g in self._guards)

    def finish(self, path: str | None = None) -> None:
        """Check that every block was closed at the end of a module."""
        if self._guards:
            raise UnterminatedConditional(path, len(self._guards))

    @property
    def depth(self) -> int:
        return len(self._guards)
