"""Error hierarchy for the converter."""
from __future__ import annotations


class BrickifyError(Exception):
    """Base error for all brickify errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StylesheetParseError(BrickifyError):
    """Raised when CSS source cannot be parsed in strict mode."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class SelectorError(BrickifyError):
    """A selector could not be compiled or evaluated."""

    def __init__(self, selector: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Invalid selector: {selector!r}", cause=cause)
        self.selector = selector


class MapperError(BrickifyError):
    """A property mapper failed on a declaration."""

    def __init__(self, prop: str, value: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Cannot map {prop}: {value}", cause=cause)
        self.property = prop
        self.value = value


class OptionsError(BrickifyError):
    """An option value is not one of the accepted choices."""
