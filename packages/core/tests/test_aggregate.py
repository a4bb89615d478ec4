import logging

import pytest

from warmup_core.aggregate import CacheWarmerAggregate
from warmup_core.ports.warmer import ICacheWarmer


class RecordingWarmer:
    def __init__(
        self,
        name: str,
        log: list[str],
        *,
        optional: bool = False,
        error: Exception | None = None,
    ) -> None:
        self.name = name
        self.log = log
        self.optional = optional
        self.error = error

    def warm_up(self, cache_dir) -> None:  # type: ignore[no-untyped-def]
        self.log.append(self.name)
        if self.error is not None:
            raise self.error

    def is_optional(self) -> bool:
        return self.optional


def test_recording_warmer_is_a_cache_warmer() -> None:
    assert isinstance(RecordingWarmer("a", []), ICacheWarmer)


def test_runs_required_warmers_in_order(tmp_path) -> None:
    log: list[str] = []
    aggregate = CacheWarmerAggregate([RecordingWarmer("paths", log)])
    aggregate.add(RecordingWarmer("router", log))

    aggregate.warm_up(tmp_path)

    assert log == ["paths", "router"]
    assert aggregate.is_optional() is False
    assert len(aggregate.warmers) == 2


def test_optional_warmers_skipped_until_enabled(tmp_path) -> None:
    log: list[str] = []
    aggregate = CacheWarmerAggregate(
        [
            RecordingWarmer("paths", log),
            RecordingWarmer("templates", log, optional=True),
        ]
    )

    aggregate.warm_up(tmp_path)
    assert log == ["paths"]

    log.clear()
    aggregate.enable_optional_warmers()
    aggregate.warm_up(tmp_path)
    assert log == ["paths", "templates"]


def test_optional_warmer_failure_is_swallowed(tmp_path, caplog) -> None:
    caplog.set_level(logging.WARNING)
    log: list[str] = []
    aggregate = CacheWarmerAggregate(
        [
            RecordingWarmer("broken", log, optional=True, error=RuntimeError("boom")),
            RecordingWarmer("after", log),
        ]
    )
    aggregate.enable_optional_warmers()

    aggregate.warm_up(tmp_path)

    assert log == ["broken", "after"]
    assert "boom" in caplog.text


def test_required_warmer_failure_propagates(tmp_path) -> None:
    log: list[str] = []
    aggregate = CacheWarmerAggregate(
        [
            RecordingWarmer("broken", log, error=RuntimeError("boom")),
            RecordingWarmer("after", log),
        ]
    )

    with pytest.raises(RuntimeError, match="boom"):
        aggregate.warm_up(tmp_path)
    assert log == ["broken"]
