"""Conversion of native Python and numpy values to WGSL values."""

from __future__ import annotations

import numpy as np

from wgsl_preprocessor.literals.base import WGSLType
from wgsl_preprocessor.literals.scalar import Bool, F32, I32, scalar_type_for_dtype
from wgsl_preprocessor.literals.vector import VECTOR_TYPES


def as_wgsl(value, wgsl_type: type[WGSLType] | None = None) -> WGSLType:
    """
    Convert a value to a WGSLType instance.

    With an explicit wgsl_type the value is constructed through it. Otherwise:
        WGSLType instance        -> itself
        bool, np.bool_           -> Bool
        int, signed numpy int    -> I32
        unsigned numpy int       -> U32
        float, numpy float       -> F32
        2..4 element sequence    -> Vec2/Vec3/Vec4 of the inferred component

    Python ints map to i32; use U32(...) or np.uint32(...) for u32 values.
    """
    if wgsl_type is not None:
        if isinstance(value, wgsl_type):
            return value
        if isinstance(value, WGSLType):
            raise TypeError(f"Expected {wgsl_type.type_name()}, got {value.type_name()}")
        return wgsl_type(value)

    if isinstance(value, WGSLType):
        return value
    if isinstance(value, (bool, np.bool_)):
        return Bool(value)
    if isinstance(value, np.generic):
        return scalar_type_for_dtype(value.dtype)(value.item())
    if isinstance(value, int):
        return I32(value)
    if isinstance(value, float):
        return F32(value)
    if isinstance(value, (list, tuple, np.ndarray)):
        return _as_vector(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a WGSL value")


def _as_vector(value) -> WGSLType:
    data = np.asarray(value)
    if data.ndim != 1 or data.shape[0] not in VECTOR_TYPES:
        raise ValueError(f"Only 1-D sequences of 2, 3 or 4 components map to WGSL vectors, got shape {data.shape}")
    component = scalar_type_for_dtype(data.dtype)
    return VECTOR_TYPES[data.shape[0]][component](data)
