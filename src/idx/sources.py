import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .constants import DEFAULT_RANDOM_SOURCE, MIN_CLOCK_RESOLUTION, SUPPORTED_RANDOM_SOURCES
from .errors import ConfigurationError, UnavailableSourceError, require_callable

logger = logging.getLogger(__name__)

TimeFunc = Callable[[], float]
RandomFunc = Callable[[], float]

_system_random = random.SystemRandom()


def unavailable_time() -> float:
    raise UnavailableSourceError(
        "No time function available, please provide time in seconds with millisecond precision",
        source="time",
    )


def secure_random() -> float:
    """Uniform float in [0, 1) drawn from the OS entropy pool."""
    return _system_random.random()


def _clock_resolution(name: str) -> Optional[float]:
    try:
        return time.get_clock_info(name).resolution
    except (AttributeError, ValueError):
        return None


def _anchored_perf_counter() -> TimeFunc:
    # Wall clock read once, then advanced by the high resolution counter.
    base_wall = time.time()
    base_perf = time.perf_counter()

    def now() -> float:
        return base_wall + (time.perf_counter() - base_perf)

    return now


def default_time_func() -> TimeFunc:
    """Pick the best wall clock with millisecond resolution.

    Tries `time.time` first, then a wall clock anchored on
    `time.perf_counter`. When neither is fine enough, returns
    `unavailable_time`, which raises on first call.
    """
    res = _clock_resolution("time")
    if res is not None and res <= MIN_CLOCK_RESOLUTION:
        logger.debug("time source: time.time (resolution %s)", res)
        return time.time
    res = _clock_resolution("perf_counter")
    if res is not None and res <= MIN_CLOCK_RESOLUTION:
        logger.debug("time source: anchored perf_counter (resolution %s)", res)
        return _anchored_perf_counter()
    logger.debug("time source: none with millisecond resolution")
    return unavailable_time


def random_func_for(name: str) -> RandomFunc:
    key = (name or DEFAULT_RANDOM_SOURCE).strip().lower()
    if key == "default":
        return random.random
    if key == "secure":
        return secure_random
    raise ConfigurationError(
        f"unknown random source '{name}', expected one of {', '.join(SUPPORTED_RANDOM_SOURCES)}",
        context={"random_source": name},
    )


@dataclass
class Sources:
    """Time and random providers used by a generator."""
    time_func: TimeFunc
    random_func: RandomFunc

    def __post_init__(self):
        require_callable(self.time_func, "time_func")
        require_callable(self.random_func, "random_func")

    @classmethod
    def default(cls, random_source: str = DEFAULT_RANDOM_SOURCE) -> "Sources":
        return cls(time_func=default_time_func(), random_func=random_func_for(random_source))
