"""Custom exception hierarchy for platefetch."""

from __future__ import annotations

from typing import Any


class PlatefetchError(Exception):
    """Base exception for all platefetch errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(PlatefetchError, ValueError):
    """Malformed call-time input — raised before any work starts.

    Examples: non-positive limit, negative or non-integer plate index.
    """

    def __init__(self, message: str = "", argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class LocatorTypeError(InvalidArgumentError, TypeError):
    """Locators are not an ordered sequence of strings."""


class OutOfRangeError(PlatefetchError, IndexError):
    """Index falls outside the valid domain; the bounds are carried along."""

    def __init__(
        self,
        message: str = "",
        value: int | None = None,
        minimum: int = 0,
        maximum: int | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class ItemFetchError(PlatefetchError):
    """Failure isolated to a single locator — other items continue.

    Stored in the result slot of the failed item, never raised out of a batch.
    error_type is one of "transport", "http_status" or "decode".
    """

    def __init__(
        self,
        message: str = "",
        locator: str = "",
        index: int = 0,
        error_type: str = "transport",
        http_status: int | None = None,
        original: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.locator = locator
        self.index = index
        self.error_type = error_type
        self.http_status = http_status
        self.original = original
        if original is not None:
            self.__cause__ = original
