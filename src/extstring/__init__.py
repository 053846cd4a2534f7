"""
ExtString - Extra operations for Python strings.

Grapheme-aware reversal, padding by character or by repeating pattern,
Unicode character-class predicates and case swapping, available as free
functions or as methods of the ``ExtString`` string subclass.
"""

from extstring.graphemes import grapheme_count, graphemes
from extstring.operations import (
    is_alphabetic,
    is_alphanumeric,
    is_numeric,
    pad_left,
    pad_left_str,
    pad_right,
    pad_right_str,
    reverse,
    swap_case,
)
from extstring.registry import OPERATIONS, Operation, apply, get_operation
from extstring.text import ExtString
from extstring.utils.errors import (
    ExtStringError,
    InvalidFillError,
    OperationArgumentError,
    UnknownOperationError,
)

__version__ = "0.2.0"
__all__ = [
    # Operations
    "reverse",
    "pad_left",
    "pad_right",
    "pad_left_str",
    "pad_right_str",
    "is_numeric",
    "is_alphabetic",
    "is_alphanumeric",
    "swap_case",
    # Graphemes
    "graphemes",
    "grapheme_count",
    # Wrapper
    "ExtString",
    # Registry
    "Operation",
    "OPERATIONS",
    "get_operation",
    "apply",
    # Errors
    "ExtStringError",
    "InvalidFillError",
    "OperationArgumentError",
    "UnknownOperationError",
]
