"""Fixed size array literals."""

from __future__ import annotations

from typing import Iterable

from wgsl_preprocessor.literals.base import WGSLType
from wgsl_preprocessor.literals.coerce import as_wgsl


def array_literal(values: Iterable, element_type: type[WGSLType] | None = None) -> str:
    """
    Build ``array<T, N>(v0,v1,...,)`` from values of one WGSL type.

    Every element is followed by a comma, the last one included. Without an
    element_type the type is taken from the first element; an empty array
    therefore needs element_type.
    """
    elements = [as_wgsl(v, element_type) for v in values]

    if element_type is not None:
        type_name = element_type.type_name()
    elif elements:
        type_name = elements[0].type_name()
    else:
        raise ValueError("Cannot infer the element type of an empty array, pass element_type")

    for index, element in enumerate(elements):
        if element.type_name() != type_name:
            raise TypeError(
                f"Array elements must share one type: element {index} is "
                f"{element.type_name()}, expected {type_name}"
            )

    body = "".join(f"{element.definition()}," for element in elements)
    return f"array<{type_name}, {len(elements)}>({body})"
