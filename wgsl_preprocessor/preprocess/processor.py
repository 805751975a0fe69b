"""Directive processor: turns one module into processed text."""

from __future__ import annotations

from typing import List

from wgsl_preprocessor import log
from wgsl_preprocessor.config import PreprocessorConfig
from wgsl_preprocessor.errors import MalformedDirective, UndefinedSymbol
from wgsl_preprocessor.preprocess.conditional import ConditionalStack
from wgsl_preprocessor.preprocess.directives import (
    DEFINE,
    ELSE,
    ENDIF,
    IFDEF,
    IFNDEF,
    INCLUDE,
    UNDEF,
    Directive,
    parse_directive,
)
from wgsl_preprocessor.preprocess.include import IncludeResolver
from wgsl_preprocessor.preprocess.loader import ModuleLoader
from wgsl_preprocessor.preprocess.macros import MacroTable


def source_lines(source: str) -> List[str]:
    r"""Split on \n only, dropping the \r of \r\n line ends."""
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class DirectiveProcessor:
    """
    Processes a root module and, through includes, the whole module tree.

    One macro table is threaded through the recursion: a define in an
    included module is visible to the lines after the include. Each module
    has its own conditional stack, which must be balanced at its end.
    """

    def __init__(
        self,
        root_path: str,
        config: PreprocessorConfig | None = None,
        loader: ModuleLoader | None = None,
    ):
        self.root_path = str(root_path)
        self.config = config or PreprocessorConfig()
        self.loader = loader or ModuleLoader(self.config.encoding)
        self.includes = IncludeResolver(
            self, self.loader, self.root_path, self.config.detect_cycles
        )

    def run(self, macros: MacroTable) -> str:
        """Process the root module and apply the valued macros to the result."""
        text = self.includes.process(self.root_path, macros)
        return self.config.substitution.apply(text, macros)

    def process_module(self, path: str, macros: MacroTable) -> str:
        """Processed text of one module, without the final substitution."""
        source = self.loader.load(path)
        stack = ConditionalStack()
        output: List[str] = []

        for line_number, line in enumerate(source_lines(source), start=1):
            directive = parse_directive(line, self.config.prefix)

            if directive is None:
                if stack.is_relevant(macros):
                    output.append(line + "\n")
                continue

            keyword = directive.keyword

            if keyword == ENDIF:
                stack.pop(path, line_number)
                continue

            if keyword == ELSE:
                stack.flip(path, line_number)
                continue

            if keyword == UNDEF:
                name = self._single_argument(directive, line, path, line_number)
                try:
                    macros.undefine(name)
                except UndefinedSymbol as e:
                    raise UndefinedSymbol(name, path, line_number) from e
                continue

            # Guards are pushed in skipped regions too, so nested endifs match
            if keyword in (IFDEF, IFNDEF):
                name = self._single_argument(directive, line, path, line_number)
                stack.push(name, must_be_defined=(keyword == IFDEF))
                continue

            if not stack.is_relevant(macros):
                continue

            if keyword == INCLUDE:
                if not directive.args:
                    raise MalformedDirective(line, "include needs at least one path", path, line_number)
                for token in directive.args:
                    output.append(self.includes.include(token, macros))
                continue

            if keyword == DEFINE:
                if not directive.args:
                    raise MalformedDirective(line, "define needs a name", path, line_number)
                name = directive.args[0]
                value = directive.define_value
                if value is not None:
                    macros.define(name, value)
                elif macros.is_defined(name):
                    # Placeholder for a value put in from Python code
                    output.append(name + "\n")
                else:
                    macros.define(name)
                continue

        stack.finish(path)
        log.debug(f"Processed {path}: {len(output)} chunks")
        return "".join(output)

    @staticmethod
    def _single_argument(directive: Directive, line: str, path: str, line_number: int) -> str:
        if len(directive.args) != 1:
            raise MalformedDirective(
                line,
                f"{directive.keyword} takes exactly one argument, got {len(directive.args)}",
                path,
                line_number,
            )
        return directive.args[0]
