"""
Closed set of vector element types accepted by the construction builder.

Only ``numpy.uint8``, ``numpy.float32`` and ``numpy.float16`` are supported.
The table below is read-only; supporting a new element type means editing
this module together with ``ObjectType``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Union

import numpy as np

from qbg_params.errors import UnsupportedElementTypeError
from qbg_params.models.enums import ObjectType

ElementTypeInput = Union[type, np.dtype, str]

_ELEMENT_OBJECT_TYPES: Mapping[np.dtype, ObjectType] = MappingProxyType({
    np.dtype(np.uint8): ObjectType.UINT8,
    np.dtype(np.float32): ObjectType.FLOAT,
    np.dtype(np.float16): ObjectType.FLOAT16,
})

_OBJECT_TYPE_ELEMENTS: Mapping[ObjectType, np.dtype] = MappingProxyType(
    {tag: dtype for dtype, tag in _ELEMENT_OBJECT_TYPES.items()}
)

SUPPORTED_ELEMENT_TYPES = tuple(dtype.name for dtype in _ELEMENT_OBJECT_TYPES)


def element_dtype(element_type: Any) -> np.dtype:
    """Resolve a scalar type, dtype or dtype name to one of the supported dtypes."""
    try:
        dtype = np.dtype(element_type)
    except TypeError:
        raise UnsupportedElementTypeError(
            f"Unsupported element type: {element_type!r}. Supported: {list(SUPPORTED_ELEMENT_TYPES)}"
        ) from None
    if dtype not in _ELEMENT_OBJECT_TYPES:
        raise UnsupportedElementTypeError(
            f"Unsupported element type: {dtype.name}. Supported: {list(SUPPORTED_ELEMENT_TYPES)}"
        )
    return dtype


def object_type_of(element_type: ElementTypeInput) -> ObjectType:
    return _ELEMENT_OBJECT_TYPES[element_dtype(element_type)]


def dtype_of(object_type: ObjectType) -> np.dtype:
    """Inverse of `object_type_of`, used to size buffers for a stored type."""
    return _OBJECT_TYPE_ELEMENTS[ObjectType.from_code(object_type)]
