"""Request metric reporting."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, Union

LATENCY_MEASURE = "maps.googleapis.com/measure/client/latency"
COUNT_VIEW = "maps.googleapis.com/client/count"
LATENCY_VIEW = "maps.googleapis.com/client/request_latency"
LATENCY_BUCKETS = (
    20.0, 25.2, 31.7, 40.0, 50.4, 63.5, 80.0, 100.8, 127.0, 160.0, 201.6, 254.0,
    320.0, 403.2, 508.0, 640.0, 806.3, 1015.9, 1280.0, 1612.7, 2031.9, 2560.0,
    3225.4, 4063.7,
)
TAG_KEYS = ("request_name", "api_status", "http_code", "metro_area")


class RequestMetric(ABC):
    """One request being measured."""

    @abstractmethod
    def end_request(self, error: BaseException | None, status_code: int | None, metro: str) -> None:
        """Record the end of the request."""


class Reporter(ABC):
    """Creates a metric for each request the client makes."""

    @abstractmethod
    def new_request(self, name: str) -> RequestMetric:
        """Start measuring a request called name."""


class _NoOpRequest(RequestMetric):
    def end_request(self, error, status_code, metro):
        pass


_NO_OP_REQUEST = _NoOpRequest()


class NoOpReporter(Reporter):
    """A reporter that records nothing."""

    def new_request(self, name: str) -> RequestMetric:
        return _NO_OP_REQUEST


@dataclass(frozen=True)
class Distribution:
    """Aggregated latency samples."""

    count: int
    minimum: float
    maximum: float
    mean: float
    bucket_counts: tuple[int, ...]


@dataclass(frozen=True)
class ViewRow:
    """One row of a view: a tag combination and its aggregate."""

    tags: dict[str, str]
    data: Union[int, Distribution]


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class _StatsRequest(RequestMetric):
    def __init__(self, reporter: StatsReporter, name: str, start: int) -> None:
        self._reporter = reporter
        self._name = name
        self._start = start

    def end_request(self, error, status_code, metro):
        duration = self._reporter._clock() - self._start
        tags = (
            self._name,
            "" if error is None else str(error),
            "" if status_code is None else str(status_code),
            metro,
        )
        self._reporter._record(tags, duration)


class StatsReporter(Reporter):
    """Records request counts and latency, grouped by request name, status, HTTP code and metro."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _wall_clock_ms
        self._lock = threading.Lock()
        self._samples: dict[tuple[str, ...], list[int]] = {}

    def new_request(self, name: str) -> RequestMetric:
        return _StatsRequest(self, name, self._clock())

    def _record(self, tags: tuple[str, ...], duration_ms: int) -> None:
        with self._lock:
            self._samples.setdefault(tags, []).append(duration_ms)

    def retrieve_data(self, view_name: str) -> list[ViewRow]:
        """Return the rows of the count or latency view."""
        if view_name not in (COUNT_VIEW, LATENCY_VIEW):
            raise KeyError(f"cannot retrieve data; view {view_name!r} is not registered")
        with self._lock:
            snapshot = {tags: list(values) for tags, values in self._samples.items()}
        rows = []
        for tags, values in snapshot.items():
            tag_map = dict(zip(TAG_KEYS, tags))
            if view_name == COUNT_VIEW:
                rows.append(ViewRow(tag_map, len(values)))
                continue
            buckets = [0] * (len(LATENCY_BUCKETS) + 1)
            for value in values:
                buckets[bisect_right(LATENCY_BUCKETS, value)] += 1
            rows.append(ViewRow(tag_map, Distribution(
                count=len(values),
                minimum=min(values),
                maximum=max(values),
                mean=sum(values) / len(values),
                bucket_counts=tuple(buckets),
            )))
        return rows