"""Preprocessor error taxonomy.

Every error aborts the build it was raised from. Where the location is known
the exception carries the module path and the 1-based line number.
"""

from __future__ import annotations

from typing import Sequence


class PreprocessorError(Exception):
    """Base class for all preprocessing errors."""


def _where(path: str | None, line_number: int | None) -> str:
    if path is None:
        return ""
    if line_number is None:
        return f"{path}: "
    return f"{path}:{line_number}: "


class FileNotFound(PreprocessorError, FileNotFoundError):
    """A module referenced by the root path or an include does not exist."""

    def __init__(self, path: str):
        self.path = str(path)
        super().__init__(f"Shader module not found: {self.path}")

    def __str__(self) -> str:
        return self.args[0]


class MalformedDirective(PreprocessorError):
    """Directive with a wrong number of arguments."""

    def __init__(
        self,
        line: str,
        reason: str,
        path: str | None = None,
        line_number: int | None = None,
    ):
        self.line = line
        self.reason = reason
        self.path = path
        self.line_number = line_number
        super().__init__(f"{_where(path, line_number)}{reason}: {line!r}")


class UndefinedSymbol(PreprocessorError):
    """`undef` of a name that is not currently defined."""

    def __init__(
        self,
        name: str,
        path: str | None = None,
        line_number: int | None = None,
    ):
        self.name = name
        self.path = path
        self.line_number = line_number
        super().__init__(f"{_where(path, line_number)}undefined symbol {name!r}")


class UnbalancedConditional(PreprocessorError):
    """Stray `else` or `endif` without an open conditional block."""

    def __init__(
        self,
        directive: str = "endif",
        path: str | None = None,
        line_number: int | None = None,
    ):
        self.directive = directive
        self.path = path
        self.line_number = line_number
        super().__init__(
            f"{_where(path, line_number)}'{directive}' without matching 'ifdef'/'ifndef'"
        )


class UnterminatedConditional(PreprocessorError):
    """Module ended with open conditional blocks."""

    def __init__(self, path: str | None = None, depth: int = 1):
        self.path = path
        self.depth = depth
        super().__init__(f"{_where(path, None)}{depth} conditional block(s) missing 'endif'")


class IncludeCycle(PreprocessorError):
    """A module includes itself, directly or through other modules."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__("Include cycle: " + " -> ".join(self.chain))


class ModuleReadError(PreprocessorError):
    """A module exists but cannot be read as text."""

    def __init__(self, path: str, cause: BaseException):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot read shader module {self.path}: {type(cause).__name__}: {cause}")
