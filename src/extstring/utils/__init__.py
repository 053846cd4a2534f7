"""
ExtString Utilities Package.

Error types and name similarity helpers.
"""

from extstring.utils.errors import (
    ExtStringError,
    InvalidFillError,
    OperationArgumentError,
    UnknownOperationError,
)
from extstring.utils.similarity import closest_names, edit_distance

__all__ = [
    # Errors
    "ExtStringError",
    "InvalidFillError",
    "OperationArgumentError",
    "UnknownOperationError",
    # String similarity
    "edit_distance",
    "closest_names",
]
