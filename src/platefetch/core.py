"""Top-level entry points: fetch_bounded(), fetch_bounded_sync(), nth_plate()."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine, Sequence
from typing import Any

import httpx

from platefetch.concurrency.fetcher import BoundedFetcher
from platefetch.plates import nth_plate, plate_index
from platefetch.types import Decode, FetchConfig, Retrieve

__all__ = ["fetch_bounded", "fetch_bounded_sync", "nth_plate", "plate_index"]


def fetch_bounded(
    locators: Sequence[str],
    limit: int,
    *,
    client: httpx.AsyncClient | None = None,
    retrieve: Retrieve | None = None,
    decode: Decode | None = None,
    config: FetchConfig | None = None,
) -> Coroutine[Any, Any, list[Any]]:
    """Fetch locators with at most `limit` in flight; await the returned coroutine.

    Each slot of the result holds the decoded JSON body for that locator,
    or an ItemFetchError when the request, status or decode failed.
    """
    fetcher = BoundedFetcher(client=client, config=config, retrieve=retrieve, decode=decode)
    return fetcher.fetch(locators, limit)


def fetch_bounded_sync(
    locators: Sequence[str],
    limit: int,
    *,
    retrieve: Retrieve | None = None,
    decode: Decode | None = None,
    config: FetchConfig | None = None,
) -> list[Any]:
    """Fetch locators with bounded concurrency (sync wrapper)."""
    return asyncio.run(
        fetch_bounded(locators, limit, retrieve=retrieve, decode=decode, config=config)
    )
