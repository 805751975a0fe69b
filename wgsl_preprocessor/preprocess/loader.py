"""Loading of shader module sources from disk or from registered strings."""

from __future__ import annotations

from typing import Dict

from wgsl_preprocessor import log
from wgsl_preprocessor.errors import FileNotFound, ModuleReadError


class ModuleLoader:
    """
    Reads shader modules.

    Sources registered by name take precedence over the filesystem, so a
    module can be included by its registered name without a file on disk:

        loader = ModuleLoader()
        loader.register("lighting", "fn lambert() -> f32 { ... }")
        # //!include lighting
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._registered: Dict[str, str] = {}

    def register(self, name: str, source: str) -> None:
        """Register (or replace) an in-memory module."""
        self._registered[name] = source

    def is_registered(self, name: str) -> bool:
        return name in self._registered

    def load(self, path: str) -> str:
        """
        Return the text of a module.

        Raises FileNotFound if it does not exist and ModuleReadError if it
        cannot be read as text (a directory, undecodable bytes).
        """
        if path in self._registered:
            return self._registered[path]

        try:
            # newline="" keeps line ends as they are in the file
            with open(path, "r", encoding=self.encoding, newline="") as f:
                source = f.read()
        except FileNotFoundError as e:
            raise FileNotFound(path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ModuleReadError(path, e) from e

        log.debug(f"Loaded shader module {path}")
        return source
