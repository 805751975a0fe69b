"""Base class for values that can be written into WGSL source."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WGSLType(ABC):
    """
    Value that can be defined in WGSL.

    Subclasses report:
    - type_name(): name of the type in WGSL syntax ("u32", "vec4<f32>", "Light")
    - declaration(): statement declaring the type, empty for builtin types
    - definition(): literal expression constructing this value
    """

    @classmethod
    @abstractmethod
    def type_name(cls) -> str:
        """Name of the type in WGSL syntax."""

    @classmethod
    def declaration(cls) -> str:
        """Type declaration statement. Builtin types need none."""
        return ""

    @abstractmethod
    def definition(self) -> str:
        """Literal expression constructing this value."""

    def __str__(self) -> str:
        return self.definition()
