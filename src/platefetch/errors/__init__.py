"""Error handling — argument, range and per-item fetch errors."""

from platefetch.errors.exceptions import (
    InvalidArgumentError,
    ItemFetchError,
    LocatorTypeError,
    OutOfRangeError,
    PlatefetchError,
)

__all__ = [
    "PlatefetchError",
    "InvalidArgumentError",
    "LocatorTypeError",
    "OutOfRangeError",
    "ItemFetchError",
]
