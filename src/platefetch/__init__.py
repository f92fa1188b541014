"""platefetch — bounded batch fetching and DMV plate sequencing."""

from platefetch.concurrency import BoundedFetcher
from platefetch.core import fetch_bounded, fetch_bounded_sync
from platefetch.errors import (
    InvalidArgumentError,
    ItemFetchError,
    LocatorTypeError,
    OutOfRangeError,
    PlatefetchError,
)
from platefetch.plates import MAX_PLATE_INDEX, TOTAL_PLATES, nth_plate, plate_blocks, plate_index
from platefetch.types import FetchConfig, FetchStats, PlateBlock

__version__ = "0.1.0"

__all__ = [
    "BoundedFetcher",
    "FetchConfig",
    "FetchStats",
    "PlateBlock",
    "fetch_bounded",
    "fetch_bounded_sync",
    "nth_plate",
    "plate_index",
    "plate_blocks",
    "TOTAL_PLATES",
    "MAX_PLATE_INDEX",
    "PlatefetchError",
    "InvalidArgumentError",
    "LocatorTypeError",
    "OutOfRangeError",
    "ItemFetchError",
]
