"""
Error types for ExtString.
"""

from typing import Any, Optional


class ExtStringError(Exception):
    """Base exception for all ExtString errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class InvalidFillError(ExtStringError, ValueError):
    """
    Raised when a padding fill is unusable.

    Single-character padding needs exactly one scalar; pattern padding
    needs a string.
    """

    def __init__(self, message: str, fill: Any = None) -> None:
        self.fill = fill
        super().__init__(message)


class OperationArgumentError(ExtStringError, ValueError):
    """Raised when string arguments for a named operation cannot be used."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class UnknownOperationError(ExtStringError, LookupError):
    """
    Raised when an operation name is not in the registry.

    Attributes:
        name: The name that was looked up
        suggestions: Registered names close to ``name``, closest first
    """

    def __init__(
        self,
        name: str,
        suggestions: Optional[list[str]] = None,
    ) -> None:
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(f"unknown operation '{name}'")

    def _format_message(self) -> str:
        if not self.suggestions:
            return self.message

        quoted = ", ".join(f"'{s}'" for s in self.suggestions)
        return f"{self.message} (did you mean {quoted}?)"
