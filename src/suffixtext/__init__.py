"""Code-point-safe string boundaries for suffix-tree text indexes."""
from .boundaries import (
    InvalidArgumentError,
    char_offsets,
    encode_scalar_value,
    first_char,
    first_scalar_value,
    from_scalar_values,
    is_high_surrogate,
    is_low_surrogate,
    last_char,
    last_scalar_value,
    remove_first_scalar_value,
    remove_last_scalar_value,
    scalar_length,
    scalar_values,
)
from .normalize import is_index_char, normalize

__all__ = [
    "InvalidArgumentError",
    "char_offsets",
    "encode_scalar_value",
    "first_char",
    "first_scalar_value",
    "from_scalar_values",
    "is_high_surrogate",
    "is_index_char",
    "is_low_surrogate",
    "last_char",
    "last_scalar_value",
    "normalize",
    "remove_first_scalar_value",
    "remove_last_scalar_value",
    "scalar_length",
    "scalar_values",
]
