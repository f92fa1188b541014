"""Concurrency — bounded batch fetching over a shared work queue."""

from platefetch.concurrency.fetcher import BoundedFetcher
from platefetch.concurrency.work_queue import WorkQueue

__all__ = ["BoundedFetcher", "WorkQueue"]
