"""Serialization of Python values to WGSL literals and declarations."""

from wgsl_preprocessor.literals.base import WGSLType
from wgsl_preprocessor.literals.scalar import Bool, F32, I32, Scalar, U32
from wgsl_preprocessor.literals.vector import Vec2, Vec3, Vec4, Vector
from wgsl_preprocessor.literals.struct import WGSLStruct
from wgsl_preprocessor.literals.coerce import as_wgsl
from wgsl_preprocessor.literals.array import array_literal

__all__ = [
    "WGSLType",
    "Scalar",
    "U32",
    "I32",
    "F32",
    "Bool",
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
    "WGSLStruct",
    "as_wgsl",
    "array_literal",
]
