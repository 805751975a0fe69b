import numpy as np
import pytest

from wgsl_preprocessor.literals import (
    Bool,
    F32,
    I32,
    U32,
    Vec2,
    Vec3,
    Vec4,
    array_literal,
    as_wgsl,
)


def test_scalar_definitions():
    assert U32(1).definition() == "1u"
    assert I32(-3).definition() == "-3"
    assert F32(1.0).definition() == "1.0"
    assert F32(2.1).definition() == "2.1"
    assert Bool(True).definition() == "true"
    assert Bool(False).definition() == "false"


def test_scalar_type_names():
    assert U32.type_name() == "u32"
    assert I32.type_name() == "i32"
    assert F32.type_name() == "f32"
    assert Bool.type_name() == "bool"
    assert U32.declaration() == ""


def test_scalar_range_checks():
    with pytest.raises(ValueError):
        U32(-1)
    with pytest.raises(ValueError):
        U32(2**32)
    with pytest.raises(ValueError):
        I32(2**31)
    with pytest.raises(TypeError):
        U32(1.5)
    with pytest.raises(ValueError):
        F32(float("inf"))


def test_vector_definitions():
    assert Vec4[F32]([1.0, 2.0, 3.0, 4.0]).definition() == "vec4<f32>(1.0, 2.0, 3.0, 4.0)"
    assert Vec2[U32]([1, 2]).definition() == "vec2<u32>(1, 2)"
    assert Vec3[I32]([-1, 0, 1]).definition() == "vec3<i32>(-1, 0, 1)"
    assert Vec3[Bool]([True, False, True]).definition() == "vec3<bool>(true, false, true)"


def test_vector_specialization_is_cached():
    assert Vec4[F32] is Vec4[F32]
    assert Vec4[F32] is not Vec4[U32]
    assert Vec3[F32].type_name() == "vec3<f32>"
    assert Vec3[F32]([1, 2, 3]) == Vec3[F32]([1.0, 2.0, 3.0])


def test_vector_of_wgsl_scalars():
    assert Vec2[U32]([U32(1), U32(2)]).definition() == "vec2<u32>(1, 2)"
    vec = Vec4[F32]([F32(1.0), F32(2.0), F32(3.0), F32(4.0)])
    assert vec.definition() == "vec4<f32>(1.0, 2.0, 3.0, 4.0)"
    assert Vec3[F32]([F32(1.0), 2, np.float32(3.0)]) == Vec3[F32]([1.0, 2.0, 3.0])


def test_vector_rejects_other_wgsl_types():
    with pytest.raises(TypeError):
        Vec2[U32]([I32(1), I32(2)])
    with pytest.raises(TypeError):
        Vec2[F32]([Vec2[F32]([1.0, 2.0]), Vec2[F32]([3.0, 4.0])])
    with pytest.raises(TypeError):
        Vec2[U32](U32(1))


def test_vector_size_and_component_checks():
    with pytest.raises(ValueError):
        Vec3[F32]([1.0, 2.0])
    with pytest.raises(ValueError):
        Vec2[U32]([1, -2])
    with pytest.raises(TypeError):
        Vec4([1, 2, 3, 4])
    with pytest.raises(TypeError):
        Vec4[str]


def test_as_wgsl_python_values():
    assert as_wgsl(True) == Bool(True)
    assert as_wgsl(3) == I32(3)
    assert as_wgsl(0.5).definition() == "0.5"
    assert as_wgsl(U32(4)) == U32(4)
    assert as_wgsl([1, 2, 3]).definition() == "vec3<i32>(1, 2, 3)"
    assert as_wgsl((0.5, 1.5)).definition() == "vec2<f32>(0.5, 1.5)"


def test_as_wgsl_numpy_values():
    assert as_wgsl(np.uint32(7)).definition() == "7u"
    assert as_wgsl(np.int32(-7)).definition() == "-7"
    assert as_wgsl(np.float32(0.25)).definition() == "0.25"
    assert as_wgsl(np.bool_(True)).definition() == "true"

    vec = as_wgsl(np.array([1.5, 2.1, 3.7, 4.9], dtype=np.float32))
    assert vec.definition() == "vec4<f32>(1.5, 2.1, 3.7, 4.9)"

    assert as_wgsl(np.array([1, 2], dtype=np.uint8)).type_name() == "vec2<u32>"


def test_as_wgsl_rejects_unknown_values():
    with pytest.raises(TypeError):
        as_wgsl("text")
    with pytest.raises(ValueError):
        as_wgsl([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        as_wgsl([1, 2, 3, 4, 5])
    with pytest.raises(TypeError):
        as_wgsl(I32(1), U32)


def test_array_literal_scalars():
    assert array_literal([U32(1), U32(0)]) == "array<u32, 2>(1u,0u,)"
    assert array_literal([True, False]) == "array<bool, 2>(true,false,)"
    assert array_literal([1, 2], element_type=U32) == "array<u32, 2>(1u,2u,)"


def test_array_literal_vectors():
    result = array_literal([[1.0, 2.0, 3.0, 4.0], [1.5, 2.1, 3.7, 4.9]])
    assert result == (
        "array<vec4<f32>, 2>(vec4<f32>(1.0, 2.0, 3.0, 4.0),vec4<f32>(1.5, 2.1, 3.7, 4.9),)"
    )


def test_array_literal_requires_one_type():
    with pytest.raises(TypeError):
        array_literal([U32(1), I32(1)])


def test_empty_array_needs_element_type():
    with pytest.raises(ValueError):
        array_literal([])
    assert array_literal([], element_type=F32) == "array<f32, 0>()"
