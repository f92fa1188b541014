"""Shared Pydantic models and protocols for platefetch."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from pydantic import BaseModel, Field

from platefetch.config.hierarchy import load_config_hierarchy

# ── Retrieval protocols ──


class FetchResponse(Protocol):
    """What the fetcher needs from a response: a success signal, a status, a body."""

    @property
    def is_success(self) -> bool: ...

    @property
    def status_code(self) -> int: ...

    def json(self) -> Any: ...


Retrieve = Callable[[str], Awaitable[FetchResponse]]
Decode = Callable[[FetchResponse], Any]


# ── Config models ──


class FetchConfig(BaseModel):
    max_concurrency: int = Field(default=5, gt=0)
    timeout: float = Field(default=10.0, gt=0)
    follow_redirects: bool = True
    user_agent: str = "platefetch"
    headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_hierarchy(cls, **overrides: Any) -> FetchConfig:
        """Build a config from defaults, YAML files, env vars and overrides."""
        merged = load_config_hierarchy(**overrides)
        return cls.model_validate(
            {k: v for k, v in merged.items() if k in cls.model_fields}
        )

    def client_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, **self.headers}


# ── Runtime models ──


class FetchStats(BaseModel):
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    concurrency: int = 0


class PlateBlock(BaseModel):
    """One digit/letter split of the plate sequence."""

    letters: int
    digits: int
    start: int
    size: int

    @property
    def stop(self) -> int:
        return self.start + self.size

    def __contains__(self, n: object) -> bool:
        return isinstance(n, int) and self.start <= n < self.stop
