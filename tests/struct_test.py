"""Tests for WGSL struct descriptions."""

from dataclasses import dataclass

import numpy as np
import pytest

from wgsl_preprocessor.literals import F32, U32, Vec4, WGSLStruct, array_literal


@dataclass
class Struct(WGSLStruct):
    data: U32


@dataclass
class Color(WGSLStruct):
    data: Vec4[F32]


@dataclass
class Light(WGSLStruct):
    color: Color
    intensity: float
    enabled: bool


@dataclass
class Params(WGSLStruct):
    wgsl_name = "SceneParams"

    count: np.uint32


@dataclass
class Named(WGSLStruct):
    label: str


class NotADataclass(WGSLStruct):
    data: U32


def test_declaration_lists_field_types():
    """Тест объявления структуры с одним полем."""
    assert Struct.type_name() == "Struct"
    assert Struct.declaration() == "struct Struct {u32};"


def test_definition_coerces_raw_values():
    assert Struct(1).definition() == "Struct(1u)"
    assert Struct(U32(5)).definition() == "Struct(5u)"


def test_vector_field():
    color = Color([1.0, 2.0, 3.0, 4.0])
    assert color.definition() == "Color(vec4<f32>(1.0, 2.0, 3.0, 4.0))"
    assert Color.declaration() == "struct Color {vec4<f32>};"


def test_vector_field_from_wgsl_scalars():
    color = Color([F32(0.0), F32(0.5), F32(1.0), F32(1.0)])
    assert color.definition() == "Color(vec4<f32>(0.0, 0.5, 1.0, 1.0))"


def test_nested_struct():
    """Тест вложенных структур: поля рендерятся рекурсивно в порядке объявления."""
    light = Light(Color([1, 0, 0, 1]), 2.0, True)
    assert Light.declaration() == "struct Light {Color, f32, bool};"
    assert light.definition() == "Light(Color(vec4<f32>(1.0, 0.0, 0.0, 1.0)), 2.0, true)"


def test_wgsl_name_override():
    assert Params.type_name() == "SceneParams"
    assert Params.declaration() == "struct SceneParams {u32};"
    assert Params(3).definition() == "SceneParams(3u)"


def test_array_of_structs():
    result = array_literal(
        [
            Color([1.0, 2.0, 3.0, 4.0]),
            Color([1.5, 2.1, 3.7, 4.9]),
        ]
    )
    assert result == (
        "array<Color, 2>("
        "Color(vec4<f32>(1.0, 2.0, 3.0, 4.0)),"
        "Color(vec4<f32>(1.5, 2.1, 3.7, 4.9)),)"
    )


def test_wrong_field_value_type():
    with pytest.raises(TypeError):
        Light(U32(1), 1.0, False).definition()


def test_unsupported_annotation():
    with pytest.raises(TypeError):
        Named("x").declaration()


def test_struct_must_be_dataclass():
    with pytest.raises(TypeError):
        NotADataclass.declaration()
