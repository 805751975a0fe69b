"""
Directive grammar.

A directive is a line that starts with the instruction prefix immediately
followed by a keyword, then whitespace separated arguments:

    //!include common.wgsl lights.wgsl
    //!define MAX_LIGHTS 16u
    //!ifdef SHADOWS
    //!else
    //!endif

Lines with the prefix but an unknown keyword are ordinary text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

INSTRUCTION_PREFIX = "//!"

INCLUDE = "include"
DEFINE = "define"
UNDEF = "undef"
IFDEF = "ifdef"
IFNDEF = "ifndef"
ELSE = "else"
ENDIF = "endif"

KEYWORDS = frozenset({INCLUDE, DEFINE, UNDEF, IFDEF, IFNDEF, ELSE, ENDIF})


@dataclass
class Directive:
    keyword: str
    args: List[str] = field(default_factory=list)
    rest: str = ""
    """Everything after the keyword, stripped."""

    @property
    def define_value(self) -> str | None:
        """Replacement text of a `define` (remainder of the line after the name)."""
        parts = self.rest.split(maxsplit=1)
        if len(parts) < 2:
            return None
        return parts[1].strip()


def parse_directive(line: str, prefix: str = INSTRUCTION_PREFIX) -> Directive | None:
    """Parse a source line. Returns None for ordinary text."""
    if not line.startswith(prefix):
        return None

    body = line[len(prefix):]
    if not body or body[0].isspace():
        return None

    parts = body.split(maxsplit=1)
    keyword = parts[0]
    if keyword not in KEYWORDS:
        return None

    rest = parts[1].strip() if len(parts) > 1 else ""
    return Directive(keyword=keyword, args=rest.split(), rest=rest)
