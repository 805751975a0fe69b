"""Scalar WGSL types: u32, i32, f32, bool."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass

import numpy as np

from wgsl_preprocessor.literals.base import WGSLType


class Scalar(WGSLType):
    """Common part of the scalar types."""

    dtype: np.dtype
    """numpy dtype with the same memory representation."""

    value: object

    def component_text(self) -> str:
        """Literal of the value as a vector component (no type suffix)."""
        return self.definition()


@dataclass
class U32(Scalar):
    """Unsigned 32-bit integer, rendered with the `u` suffix: ``1u``."""

    value: int
    dtype = np.dtype(np.uint32)

    def __post_init__(self):
        self.value = operator.index(self.value)
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"{self.value} is out of range for u32")

    @classmethod
    def type_name(cls) -> str:
        return "u32"

    def definition(self) -> str:
        return f"{self.value}u"

    def component_text(self) -> str:
        return str(self.value)


@dataclass
class I32(Scalar):
    """Signed 32-bit integer."""

    value: int
    dtype = np.dtype(np.int32)

    def __post_init__(self):
        self.value = operator.index(self.value)
        if not -0x80000000 <= self.value <= 0x7FFFFFFF:
            raise ValueError(f"{self.value} is out of range for i32")

    @classmethod
    def type_name(cls) -> str:
        return "i32"

    def definition(self) -> str:
        return str(self.value)


@dataclass
class F32(Scalar):
    """32-bit float. Rendered as the shortest decimal that round-trips float32."""

    value: float
    dtype = np.dtype(np.float32)

    def __post_init__(self):
        self.value = float(self.value)
        if not math.isfinite(self.value):
            raise ValueError(f"{self.value} has no WGSL literal")

    @classmethod
    def type_name(cls) -> str:
        return "f32"

    def definition(self) -> str:
        return np.format_float_positional(np.float32(self.value), trim="0")


@dataclass
class Bool(Scalar):
    value: bool
    dtype = np.dtype(np.bool_)

    def __post_init__(self):
        self.value = bool(self.value)

    @classmethod
    def type_name(cls) -> str:
        return "bool"

    def definition(self) -> str:
        return "true" if self.value else "false"


SCALAR_TYPES = (U32, I32, F32, Bool)


def scalar_type_for_dtype(dtype) -> type[Scalar]:
    """Pick the scalar type matching a numpy dtype (any width)."""
    dtype = np.dtype(dtype)
    if dtype.kind == "b":
        return Bool
    if dtype.kind == "u":
        return U32
    if dtype.kind == "i":
        return I32
    if dtype.kind == "f":
        return F32
    raise TypeError(f"No WGSL scalar type for dtype {dtype}")
