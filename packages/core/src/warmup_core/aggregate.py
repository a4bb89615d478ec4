"""Ordered warm-up pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from .ports.warmer import ICacheWarmer

logger = logging.getLogger(__name__)


class CacheWarmerAggregate:
    """
    Runs a sequence of cache warmers in registration order.

    Order is the phase ordering: a warmer whose output another one needs
    (e.g. a template-path cache read by the template loader) must be
    added first.

    Optional warmers are skipped unless :meth:`enable_optional_warmers`
    was called. When they do run, their errors are logged and swallowed.
    Errors from required warmers propagate.
    """

    def __init__(self, warmers: Iterable[ICacheWarmer] = ()) -> None:
        self._warmers: list[ICacheWarmer] = list(warmers)
        self._optional_enabled = False

    @property
    def warmers(self) -> list[ICacheWarmer]:
        return list(self._warmers)

    def add(self, warmer: ICacheWarmer) -> None:
        self._warmers.append(warmer)

    def enable_optional_warmers(self) -> None:
        self._optional_enabled = True

    def warm_up(self, cache_dir: str | Path) -> None:
        for warmer in self._warmers:
            name = type(warmer).__name__

            if not warmer.is_optional():
                warmer.warm_up(cache_dir)
                continue

            if not self._optional_enabled:
                logger.debug("Skipping optional cache warmer %s", name)
                continue

            try:
                warmer.warm_up(cache_dir)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Optional cache warmer %s failed: %s", name, exc)

    def is_optional(self) -> bool:
        return False
