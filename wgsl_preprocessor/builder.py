"""
ShaderBuilder - public facade of the preprocessor.

Usage:
    from wgsl_preprocessor import ShaderBuilder, U32

    source = (
        ShaderBuilder("shaders/main.wgsl")
        .define("SHADOWS")
        .put_constant("MAX_LIGHTS", U32(16))
        .put_array_definition("KERNEL", [0.25, 0.5, 0.25])
        .build_source()
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from wgsl_preprocessor import log
from wgsl_preprocessor.config import PreprocessorConfig
from wgsl_preprocessor.errors import PreprocessorError
from wgsl_preprocessor.literals import WGSLStruct, WGSLType, array_literal, as_wgsl
from wgsl_preprocessor.preprocess.loader import ModuleLoader
from wgsl_preprocessor.preprocess.macros import MacroTable
from wgsl_preprocessor.preprocess.processor import DirectiveProcessor


@dataclass
class ShaderModuleDescriptor:
    """Input of the shader compiler: a label and the final WGSL source."""

    label: str
    source: str


class ShaderBuilder:
    """
    Holds the root module path and the macros put in from Python code.

    All mutators return self so calls can be chained. build_source() does not
    change the builder: every build starts from a copy of the macro table, so
    defines met in the shader text do not leak into later builds.
    """

    def __init__(
        self,
        source_path: str | Path,
        config: PreprocessorConfig | None = None,
        loader: ModuleLoader | None = None,
    ):
        """
        Args:
            source_path: Path to the root WGSL module (or a name registered
                in the loader). Relative includes are resolved against its
                directory.
            config: Preprocessor settings, defaults if None
            loader: Module loader, a fresh ModuleLoader if None
        """
        self.source_path = str(source_path)
        self.config = config or PreprocessorConfig()
        self.loader = loader or ModuleLoader(self.config.encoding)
        self.macros = MacroTable()

    @property
    def label(self) -> str:
        """Name of the root module file without its extension."""
        return Path(self.source_path).stem

    def register_module(self, name: str, source: str) -> "ShaderBuilder":
        """Make an in-memory module available to include directives."""
        self.loader.register(name, source)
        return self

    def define(self, name: str) -> "ShaderBuilder":
        """Define a flag, as `//!define name` at the top of the root module would."""
        self.macros.define(name)
        return self

    def undefine(self, name: str) -> "ShaderBuilder":
        """Remove a macro; UndefinedSymbol if it is not defined."""
        self.macros.undefine(name)
        return self

    def put_constant(self, name: str, value) -> "ShaderBuilder":
        """
        WGSL's parallel to C's `#define name value`.

        Every occurrence of name in the built source is replaced with the
        literal of value. Python ints become i32; use U32 for u32.
        """
        self.macros.define(name, as_wgsl(value).definition())
        return self

    def put_constant_map(self, constants: Mapping[str, object]) -> "ShaderBuilder":
        """Calls put_constant for every (name, value) pair."""
        for name, value in constants.items():
            self.put_constant(name, value)
        return self

    def put_array_definition(
        self,
        name: str,
        values: Iterable,
        element_type: type[WGSLType] | None = None,
    ) -> "ShaderBuilder":
        """
        Define a constant array.

        The `//!define name` line of the shader is replaced with
        ``array<T, N>(v0,v1,...,);``. All values must have one WGSL type.
        """
        self.macros.define(name, array_literal(values, element_type) + ";")
        return self

    def put_struct_definition(self, struct_type: type[WGSLStruct]) -> "ShaderBuilder":
        """Replace the `//!define TypeName` placeholder with the struct declaration."""
        self.macros.define(struct_type.type_name(), struct_type.declaration())
        return self

    def build_source(self) -> str:
        """Preprocess the module tree and return the final WGSL source."""
        processor = DirectiveProcessor(self.source_path, self.config, self.loader)
        try:
            source = processor.run(self.macros.copy())
        except PreprocessorError as e:
            log.error(e, f"Failed to build {self.source_path}")
            raise
        log.debug(f"Built shader {self.source_path} ({len(source)} chars)")
        return source

    def build(self) -> ShaderModuleDescriptor:
        """Build the descriptor handed to the shader compiler."""
        return ShaderModuleDescriptor(label=self.label, source=self.build_source())
