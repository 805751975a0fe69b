"""Preprocessor configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from wgsl_preprocessor.preprocess.macros import Substitution, WholeStringSubstitution


@dataclass
class PreprocessorConfig:
    """Конфигурация препроцессора."""

    prefix: str = "//!"
    """Instruction prefix; a directive line starts with prefix + keyword."""

    encoding: str = "utf-8"
    """Encoding used to read shader modules from disk."""

    detect_cycles: bool = True
    """Raise IncludeCycle instead of recursing forever on cyclic includes."""

    substitution: Substitution = field(default_factory=WholeStringSubstitution)
    """Strategy of the final macro substitution pass."""

    def __post_init__(self):
        if not self.prefix or self.prefix != self.prefix.strip():
            raise ValueError(f"Invalid directive prefix: {self.prefix!r}")
