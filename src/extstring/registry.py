"""
ExtString - Operation Registry.

Maps public operation names to their implementations so that callers
holding only a name and string arguments (the command line, user input)
can dispatch to an operation.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from extstring import operations
from extstring.graphemes import grapheme_count, graphemes
from extstring.utils.errors import OperationArgumentError, UnknownOperationError
from extstring.utils.similarity import closest_names


@dataclass(frozen=True, slots=True)
class Operation:
    """
    A registered string operation.

    Attributes:
        name: Public name, snake_case
        func: The implementation; takes the text first
        summary: One-line description
        kind: ``"text"`` for text-producing operations, ``"predicate"`` for
            boolean ones, ``"info"`` for everything else
        arg_names: Names of the arguments after the text
        arg_types: Converters from a raw string, one per argument
        optional_args: How many trailing arguments may be omitted
    """

    name: str
    func: Callable[..., Any]
    summary: str
    kind: str = "text"
    arg_names: tuple[str, ...] = ()
    arg_types: tuple[Callable[[str], Any], ...] = ()
    optional_args: int = 0

    def __call__(self, text: str, *args: Any) -> Any:
        return self.func(text, *args)

    @property
    def signature(self) -> str:
        required = len(self.arg_names) - self.optional_args
        parts = ["TEXT"]
        for index, arg in enumerate(self.arg_names):
            parts.append(arg.upper() if index < required else f"[{arg.upper()}]")
        return " ".join(parts)

    def convert_args(self, raw: Sequence[str]) -> list[Any]:
        """
        Convert string arguments to the types the operation expects.

        Raises:
            OperationArgumentError: On a wrong argument count or a value
                that does not convert
        """
        required = len(self.arg_names) - self.optional_args
        if not required <= len(raw) <= len(self.arg_names):
            raise OperationArgumentError(
                self.name,
                f"expected {self.signature}, got {len(raw)} argument(s) after TEXT",
            )

        converted = []
        for arg_name, convert, value in zip(self.arg_names, self.arg_types, raw):
            try:
                converted.append(convert(value))
            except ValueError:
                raise OperationArgumentError(
                    self.name, f"invalid {arg_name} {value!r}"
                ) from None
        return converted


_PAD_CHAR = {"arg_names": ("length", "fill"), "arg_types": (int, str), "optional_args": 1}
_PAD_PATTERN = {"arg_names": ("length", "pattern"), "arg_types": (int, str)}

OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("reverse", operations.reverse, "Reverse grapheme clusters"),
        Operation(
            "pad_left", operations.pad_left, "Pad left with a single character", **_PAD_CHAR
        ),
        Operation(
            "pad_right", operations.pad_right, "Pad right with a single character", **_PAD_CHAR
        ),
        Operation(
            "pad_left_str",
            operations.pad_left_str,
            "Pad left by cycling a pattern",
            **_PAD_PATTERN,
        ),
        Operation(
            "pad_right_str",
            operations.pad_right_str,
            "Pad right by cycling a pattern",
            **_PAD_PATTERN,
        ),
        Operation(
            "is_numeric",
            operations.is_numeric,
            "Non-empty and every character numeric",
            kind="predicate",
        ),
        Operation(
            "is_alphabetic",
            operations.is_alphabetic,
            "Non-empty and every character alphabetic",
            kind="predicate",
        ),
        Operation(
            "is_alphanumeric",
            operations.is_alphanumeric,
            "Non-empty and every character alphabetic or numeric",
            kind="predicate",
        ),
        Operation("swap_case", operations.swap_case, "Invert the case of cased characters"),
        Operation("graphemes", graphemes, "Split into grapheme clusters", kind="info"),
        Operation("grapheme_count", grapheme_count, "Count grapheme clusters", kind="info"),
    )
}


def get_operation(name: str) -> Operation:
    """
    Look up an operation by name.

    Hyphens are accepted in place of underscores (``pad-left``).

    Raises:
        UnknownOperationError: If no operation has that name. The error
            lists close matches.
    """
    key = name.strip().replace("-", "_")
    try:
        return OPERATIONS[key]
    except KeyError:
        raise UnknownOperationError(name, closest_names(key, OPERATIONS)) from None


def apply(name: str, text: str, *args: Any) -> Any:
    """Look up an operation by name and call it on text."""
    return get_operation(name)(text, *args)
