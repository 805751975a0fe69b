"""
wgsl_preprocessor - C-like preprocessing for WGSL shaders.

Основные модули:
- literals - serialization of Python values to WGSL literals and structs
- preprocess - directives, conditional blocks, includes and macros
- builder - ShaderBuilder facade
"""

from wgsl_preprocessor import log
from wgsl_preprocessor.errors import (
    FileNotFound,
    IncludeCycle,
    MalformedDirective,
    ModuleReadError,
    PreprocessorError,
    UnbalancedConditional,
    UndefinedSymbol,
    UnterminatedConditional,
)
from wgsl_preprocessor.literals import (
    Bool,
    F32,
    I32,
    U32,
    Vec2,
    Vec3,
    Vec4,
    WGSLStruct,
    WGSLType,
    array_literal,
    as_wgsl,
)
from wgsl_preprocessor.preprocess import (
    MacroTable,
    ModuleLoader,
    WholeStringSubstitution,
    WordBoundarySubstitution,
)
from wgsl_preprocessor.config import PreprocessorConfig
from wgsl_preprocessor.preprocess.processor import DirectiveProcessor
from wgsl_preprocessor.builder import ShaderBuilder, ShaderModuleDescriptor

__version__ = '0.1.0'

__all__ = [
    # Builder
    'ShaderBuilder',
    'ShaderModuleDescriptor',
    'PreprocessorConfig',
    'DirectiveProcessor',
    'MacroTable',
    'ModuleLoader',
    'WholeStringSubstitution',
    'WordBoundarySubstitution',
    # Literals
    'WGSLType',
    'WGSLStruct',
    'U32',
    'I32',
    'F32',
    'Bool',
    'Vec2',
    'Vec3',
    'Vec4',
    'as_wgsl',
    'array_literal',
    # Errors
    'PreprocessorError',
    'FileNotFound',
    'MalformedDirective',
    'UndefinedSymbol',
    'UnbalancedConditional',
    'UnterminatedConditional',
    'IncludeCycle',
    'ModuleReadError',
]
