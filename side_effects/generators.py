"""Random value source backing the side-effect routes."""

from __future__ import annotations

import random
import threading

import structlog

from side_effects import metrics

LOGGER = structlog.get_logger(__name__)


class NumberSource:
    """Seedable random source shared by every request of one app instance."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def number(self, lower: int, upper: int) -> int:
        """Return an integer in ``[lower, upper]``; reversed bounds are swapped."""

        if lower > upper:
            lower, upper = upper, lower
        with self._lock:
            value = self._random.randint(lower, upper)
        metrics.observe_draw("number")
        LOGGER.debug("draw.number", lower=lower, upper=upper, value=value)
        return value

    def unit(self) -> float:
        with self._lock:
            value = self._random.random()
        metrics.observe_draw("unit")
        LOGGER.debug("draw.unit", value=value)
        return value
