"""
Struct description provider.

A WGSL struct is described by a dataclass deriving from WGSLStruct. Field
annotations name the WGSL type of every field: scalar and vector classes,
other WGSLStruct subclasses, or plain ``bool``/``int``/``float``.

    @dataclass
    class Light(WGSLStruct):
        color: Vec3[F32]
        intensity: F32

    Light.declaration()   # "struct Light {vec3<f32>, f32};"
    Light([1.0, 0.5, 0.0], 2.0).definition()
    # "Light(vec3<f32>(1.0, 0.5, 0.0), 2.0)"

Field values may be given either as WGSL values or as raw Python/numpy
values; they are coerced through the annotated type when rendered.
"""

from __future__ import annotations

import dataclasses
import typing
from typing import ClassVar, List, Tuple

import numpy as np

from wgsl_preprocessor.literals.base import WGSLType
from wgsl_preprocessor.literals.scalar import Bool, F32, I32, U32

# Python annotations accepted in place of WGSL scalar classes
_PYTHON_TYPES = {
    bool: Bool,
    int: I32,
    float: F32,
    np.bool_: Bool,
    np.uint32: U32,
    np.int32: I32,
    np.float32: F32,
}


def wgsl_type_for_annotation(annotation) -> type[WGSLType]:
    """Map a field annotation to the WGSL type class describing it."""
    if isinstance(annotation, type) and issubclass(annotation, WGSLType):
        return annotation
    mapped = _PYTHON_TYPES.get(annotation)
    if mapped is None:
        raise TypeError(f"Annotation {annotation!r} has no WGSL counterpart")
    return mapped


class WGSLStruct(WGSLType):
    """
    Base class for dataclasses that describe WGSL structs.

    type_name() defaults to the class name; set the ``wgsl_name`` class
    attribute to override it.
    """

    wgsl_name: ClassVar[str | None] = None

    @classmethod
    def wgsl_fields(cls) -> List[Tuple[str, type[WGSLType]]]:
        """(field name, WGSL type) pairs in declaration order."""
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass to describe a WGSL struct")

        cached = cls.__dict__.get("_wgsl_fields_cache")
        if cached is not None:
            return cached

        # Resolved lazily so fields may reference structs declared later
        hints = typing.get_type_hints(cls)
        fields = [
            (f.name, wgsl_type_for_annotation(hints[f.name]))
            for f in dataclasses.fields(cls)
        ]
        cls._wgsl_fields_cache = fields
        return fields

    @classmethod
    def type_name(cls) -> str:
        return cls.wgsl_name or cls.__name__

    @classmethod
    def declaration(cls) -> str:
        members = ", ".join(field_type.type_name() for _, field_type in cls.wgsl_fields())
        return f"struct {cls.type_name()} {{{members}}};"

    def definition(self) -> str:
        arguments = ", ".join(
            _coerce(getattr(self, name), field_type).definition()
            for name, field_type in self.wgsl_fields()
        )
        return f"{self.type_name()}({arguments})"


def _coerce(value, field_type: type[WGSLType]) -> WGSLType:
    if isinstance(value, field_type):
        return value
    if isinstance(value, WGSLType):
        raise TypeError(
            f"Field of type {field_type.type_name()} got a {value.type_name()} value"
        )
    return field_type(value)
