"""Include resolution."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, List

from wgsl_preprocessor import log
from wgsl_preprocessor.errors import IncludeCycle
from wgsl_preprocessor.preprocess.loader import ModuleLoader
from wgsl_preprocessor.preprocess.macros import MacroTable

if TYPE_CHECKING:
    from wgsl_preprocessor.preprocess.processor import DirectiveProcessor


class IncludeResolver:
    """
    Resolves include tokens and processes the referenced modules.

    Relative include paths are resolved against the directory of the root
    module, whatever module the include appears in. Absolute paths and names
    registered in the loader are used as is.

    The chain of modules being processed is tracked; re-entering a module
    that is still open raises IncludeCycle when detect_cycles is set.
    Including the same module several times side by side is fine.
    """

    def __init__(
        self,
        processor: "DirectiveProcessor",
        loader: ModuleLoader,
        root_path: str,
        detect_cycles: bool = True,
    ):
        self._processor = processor
        self._loader = loader
        self._base_dir = os.path.dirname(root_path)
        self._detect_cycles = detect_cycles
        self._chain: List[str] = []

    def resolve_path(self, token: str) -> str:
        if self._loader.is_registered(token) or os.path.isabs(token):
            return token
        return os.path.join(self._base_dir, token)

    def include(self, token: str, macros: MacroTable) -> str:
        """Process the module named by an include token and return its text."""
        path = self.resolve_path(token)
        log.debug(f"Including {token} as {path}")
        return self.process(path, macros)

    def process(self, path: str, macros: MacroTable) -> str:
        """Run the directive processor on a module while tracking the include chain."""
        key = os.path.normpath(path)
        if self._detect_cycles and key in self._chain:
            raise IncludeCycle(self._chain + [key])

        self._chain.append(key)
        try:
            return self._processor.process_module(path, macros)
        finally:
            self._chain.pop()
