"""
Fixed size WGSL vectors: vec2<T>, vec3<T>, vec4<T>.

The component type is chosen by subscription:

    Vec4[F32]([1.0, 2.0, 3.0, 4.0]).definition()
    # -> "vec4<f32>(1.0, 2.0, 3.0, 4.0)"

Components are stored in a numpy array of the matching dtype.
"""

from __future__ import annotations

from typing import ClassVar, Dict, Tuple

import numpy as np

from wgsl_preprocessor.literals.base import WGSLType
from wgsl_preprocessor.literals.scalar import SCALAR_TYPES, Scalar


class Vector(WGSLType):
    size: ClassVar[int] = 0
    component: ClassVar[type[Scalar] | None] = None

    _specializations: ClassVar[Dict[Tuple[type, type], type]] = {}

    def __class_getitem__(cls, component: type[Scalar]) -> type["Vector"]:
        if cls.size == 0:
            raise TypeError("Use Vec2, Vec3 or Vec4")
        if component not in SCALAR_TYPES:
            raise TypeError(f"Vector component must be one of {SCALAR_TYPES}, got {component!r}")

        key = (cls, component)
        specialized = Vector._specializations.get(key)
        if specialized is None:
            specialized = type(cls)(
                f"{cls.__name__}[{component.__name__}]",
                (cls,),
                {"component": component, "__module__": cls.__module__},
            )
            Vector._specializations[key] = specialized
        return specialized

    def __init__(self, components):
        if self.component is None:
            raise TypeError(f"{type(self).__name__} needs a component type, e.g. {type(self).__name__}[F32]")

        if isinstance(components, WGSLType):
            raise TypeError(f"{self.type_name()} needs a sequence of components, got {components.type_name()}")
        if np.ndim(components) != 1:
            raise ValueError(f"{self.type_name()} needs a flat sequence of components")

        # Go through the scalar type so range checks apply to every component
        scalars = [self._component(c) for c in components]
        if len(scalars) != self.size:
            raise ValueError(f"{self.type_name()} needs {self.size} components, got {len(scalars)}")

        self._scalars = scalars
        self.data = np.array([s.value for s in scalars], dtype=self.component.dtype)

    def _component(self, value) -> Scalar:
        if isinstance(value, self.component):
            return value
        if isinstance(value, WGSLType):
            raise TypeError(
                f"{self.type_name()} component must be {self.component.type_name()}, got {value.type_name()}"
            )
        if isinstance(value, np.generic):
            value = value.item()
        return self.component(value)

    @classmethod
    def type_name(cls) -> str:
        if cls.component is None:
            return f"vec{cls.size}"
        return f"vec{cls.size}<{cls.component.type_name()}>"

    def definition(self) -> str:
        components = ", ".join(s.component_text() for s in self._scalars)
        return f"{self.type_name()}({components})"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data.tolist()})"


class Vec2(Vector):
    size = 2


class Vec3(Vector):
    size = 3


class Vec4(Vector):
    size = 4


VECTOR_TYPES = {2: Vec2, 3: Vec3, 4: Vec4}
