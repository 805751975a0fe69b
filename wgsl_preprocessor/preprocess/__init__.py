"""Line-oriented preprocessing: directives, conditional blocks, includes, macros."""

from wgsl_preprocessor.preprocess.macros import (
    MacroTable,
    Substitution,
    WholeStringSubstitution,
    WordBoundarySubstitution,
)
from wgsl_preprocessor.preprocess.conditional import ConditionalStack
from wgsl_preprocessor.preprocess.directives import Directive, parse_directive
from wgsl_preprocessor.preprocess.loader import ModuleLoader

__all__ = [
    "MacroTable",
    "Substitution",
    "WholeStringSubstitution",
    "WordBoundarySubstitution",
    "ConditionalStack",
    "Directive",
    "parse_directive",
    "ModuleLoader",
]
