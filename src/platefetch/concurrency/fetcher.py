"""Bounded-concurrency batch fetcher."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Coroutine, Sequence
from typing import Any

import httpx

from platefetch.concurrency.work_queue import WorkQueue
from platefetch.errors.exceptions import (
    InvalidArgumentError,
    ItemFetchError,
    LocatorTypeError,
)
from platefetch.types import Decode, FetchConfig, FetchResponse, FetchStats, Retrieve

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def validate_locators(locators: object) -> list[str]:
    """Reject anything that is not an ordered sequence of strings."""
    if isinstance(locators, (str, bytes, bytearray)) or not isinstance(locators, Sequence):
        raise LocatorTypeError(
            f'"locators" must be a sequence of strings, got {type(locators).__name__}',
            argument="locators",
        )
    for i, locator in enumerate(locators):
        if not isinstance(locator, str):
            raise LocatorTypeError(
                f'"locators[{i}]" must be a string, got {type(locator).__name__}',
                argument="locators",
            )
    return list(locators)


def validate_limit(limit: object) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidArgumentError(
            f'"limit" must be a positive integer, got {limit!r}', argument="limit"
        )
    return limit


class BoundedFetcher:
    """Fetch a batch of locators with at most `limit` requests in flight.

    Workers pull the next unclaimed index from a shared queue, so a slow
    response never leaves a worker idle while work remains. Results come
    back in input order; a failed item holds an ItemFetchError instead of
    aborting the batch.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        config: FetchConfig | None = None,
        retrieve: Retrieve | None = None,
        decode: Decode | None = None,
    ) -> None:
        self._client = client
        self._config = config or FetchConfig()
        self._retrieve = retrieve
        self._decode = decode
        self._last_stats = FetchStats()

    @property
    def config(self) -> FetchConfig:
        return self._config

    @property
    def last_stats(self) -> FetchStats:
        """Stats of the batch that finished most recently.

        Only meaningful when batches run one after another; overlapping
        batches should use fetch_with_stats().
        """
        return self._last_stats

    def fetch(
        self,
        locators: Sequence[str],
        limit: int | None = None,
    ) -> Coroutine[Any, Any, list[Any]]:
        """Fetch every locator and return decoded payloads or errors, by index.

        Args:
            locators: Ordered sequence of URLs (or whatever `retrieve` accepts).
            limit: Max concurrent retrievals. Defaults to config.max_concurrency.

        Arguments are checked on the call itself, so InvalidArgumentError (or
        LocatorTypeError) is raised before a coroutine exists to await.
        """
        urls, limit = self._validate(locators, limit)
        return self._fetch_results(urls, limit)

    def fetch_with_stats(
        self,
        locators: Sequence[str],
        limit: int | None = None,
    ) -> Coroutine[Any, Any, tuple[list[Any], FetchStats]]:
        """Like fetch(), but also return the FetchStats of this batch."""
        urls, limit = self._validate(locators, limit)
        return self._fetch(urls, limit)

    def _validate(self, locators: object, limit: object) -> tuple[list[str], int]:
        urls = validate_locators(locators)
        return urls, validate_limit(self._config.max_concurrency if limit is None else limit)

    async def _fetch_results(self, urls: list[str], limit: int) -> list[Any]:
        results, _ = await self._fetch(urls, limit)
        return results

    async def _fetch(self, urls: list[str], limit: int) -> tuple[list[Any], FetchStats]:
        if not urls:
            results: list[Any] = []
            stats = FetchStats()
        elif self._retrieve is not None:
            results, stats = await self._run(urls, limit, self._retrieve)
        elif self._client is not None:
            results, stats = await self._run(urls, limit, self._client.get)
        else:
            async with self._build_client() as client:
                results, stats = await self._run(urls, limit, client.get)

        self._last_stats = stats
        return results, stats

    async def _run(
        self, urls: list[str], limit: int, retrieve: Retrieve
    ) -> tuple[list[Any], FetchStats]:
        concurrency = min(limit, len(urls))
        queue = WorkQueue(len(urls))
        results: list[Any] = [_UNSET] * len(urls)

        logger.debug("Fetching %d locators with %d workers", len(urls), concurrency)

        async def worker() -> None:
            while (index := await queue.claim()) is not None:
                results[index] = await self._fetch_one(retrieve, urls[index], index)

        await asyncio.gather(*(worker() for _ in range(concurrency)))

        failed = sum(1 for r in results if isinstance(r, ItemFetchError))
        stats = FetchStats(
            total=len(urls),
            succeeded=len(urls) - failed,
            failed=failed,
            concurrency=concurrency,
        )
        logger.debug("Fetched %d locators (%d failed)", len(urls), failed)
        return results, stats

    async def _fetch_one(self, retrieve: Retrieve, url: str, index: int) -> Any:
        try:
            response = await retrieve(url)
        except Exception as exc:
            return self._failure(
                f"Request for {url} failed: {exc}", url, index, "transport", original=exc
            )

        try:
            ok, status = bool(response.is_success), response.status_code
        except Exception as exc:
            return self._failure(
                f"Malformed response for {url}: {exc}", url, index, "transport", original=exc
            )

        if not ok:
            return self._failure(
                f"HTTP {status} for {url}", url, index, "http_status", http_status=status
            )

        try:
            return await self._decode_body(response)
        except Exception as exc:
            return self._failure(
                f"Could not decode response from {url}: {exc}",
                url,
                index,
                "decode",
                http_status=status,
                original=exc,
            )

    async def _decode_body(self, response: FetchResponse) -> Any:
        decoded = self._decode(response) if self._decode else response.json()
        if inspect.isawaitable(decoded):
            decoded = await decoded
        return decoded

    @staticmethod
    def _failure(
        message: str,
        url: str,
        index: int,
        error_type: str,
        http_status: int | None = None,
        original: Exception | None = None,
    ) -> ItemFetchError:
        logger.warning("Locator %d failed: %s", index, message)
        return ItemFetchError(
            message,
            locator=url,
            index=index,
            error_type=error_type,
            http_status=http_status,
            original=original,
        )

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._config.timeout,
            follow_redirects=self._config.follow_redirects,
            headers=self._config.client_headers(),
        )
