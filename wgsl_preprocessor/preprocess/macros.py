"""
Macro table and the final substitution pass.

A macro is either a flag (value None) or bound to replacement text. The
substitution pass only uses valued macros.
"""

from __future__ import annotations

import re
from typing import Dict, Iterator, Optional, Protocol, Tuple

from wgsl_preprocessor.errors import UndefinedSymbol


class MacroTable:
    """Flat name -> optional replacement text mapping. Iterates in insertion order."""

    def __init__(self, macros: Dict[str, Optional[str]] | None = None):
        self._macros: Dict[str, Optional[str]] = dict(macros or {})

    def define(self, name: str, value: str | None = None) -> None:
        """Insert or overwrite a macro. value None defines a flag."""
        self._macros[name] = value

    def undefine(self, name: str) -> None:
        """Remove a macro; UndefinedSymbol if it is not defined."""
        if name not in self._macros:
            raise UndefinedSymbol(name)
        del self._macros[name]

    def is_defined(self, name: str) -> bool:
        return name in self._macros

    def value(self, name: str) -> str | None:
        """Replacement text of a macro (None for flags and unknown names)."""
        return self._macros.get(name)

    def valued(self) -> Iterator[Tuple[str, str]]:
        """(name, value) pairs of the macros that carry replacement text."""
        for name, value in self._macros.items():
            if value is not None:
                yield name, value

    def copy(self) -> "MacroTable":
        return MacroTable(self._macros)

    def __contains__(self, name: str) -> bool:
        return name in self._macros

    def __len__(self) -> int:
        return len(self._macros)

    def __iter__(self) -> Iterator[str]:
        return iter(self._macros)

    def __repr__(self) -> str:
        return f"MacroTable({self._macros!r})"


class Substitution(Protocol):
    """Strategy that applies the valued macros of a table to text."""

    def apply(self, text: str, macros: MacroTable) -> str:
        ...


class WholeStringSubstitution:
    """
    Replace every literal occurrence of each macro name with its value.

    No tokenization: a name is also replaced inside longer identifiers
    (with ONE -> 1u, "ONES" becomes "1uS"). Macros are applied once each, in
    table order, and replacement values are not scanned again for the macros
    already applied.
    """

    def apply(self, text: str, macros: MacroTable) -> str:
        for name, value in macros.valued():
            text = text.replace(name, value)
        return text


class WordBoundarySubstitution:
    """Replace macro names only where they form a whole identifier."""

    def apply(self, text: str, macros: MacroTable) -> str:
        for name, value in macros.valued():
            pattern = r"(?<![A-Za-z0-9_])" + re.escape(name) + r"(?![A-Za-z0-9_])"
            text = re.sub(pattern, lambda _match: value, text)
        return text
