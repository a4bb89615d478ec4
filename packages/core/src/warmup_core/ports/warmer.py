"""ICacheWarmer - Protocol for a single cache warm-up step."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class ICacheWarmer(Protocol):
    """
    A step that precomputes cached artifacts ahead of the first request.
    Warmers are run once per deployment by a
    :class:`~warmup_core.aggregate.CacheWarmerAggregate`.
    """

    def warm_up(self, cache_dir: str | Path) -> None:
        """Populate caches below ``cache_dir`` (or wherever the step keeps them)."""
        ...

    def is_optional(self) -> bool:
        """
        Optional warmers may be skipped, and their failures never block
        application startup.
        """
        ...
