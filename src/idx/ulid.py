import logging
import math
from typing import List, Optional

from .codec import encode, max_value
from .config import IdxConfig, load_config
from .constants import ENCODING, ENCODING_LEN, RANDOM_LEN, TIME_LEN
from .errors import TimestampRangeError, require_callable
from .sources import RandomFunc, Sources, TimeFunc

logger = logging.getLogger(__name__)


class UlidGenerator:
    """Builds ULIDs from an injected time source and random source.

    A ULID is a 10 character millisecond timestamp followed by 16 random
    characters, both in Crockford's Base32. IDs from different milliseconds
    sort in time order; IDs within one millisecond are in no particular
    order.

    `time_func` returns seconds since the unix epoch with millisecond
    precision, `random_func` a float in [0, 1). With `strict` set, explicit
    timestamps that do not fit the time field raise TimestampRangeError
    instead of losing their high digits.
    """

    def __init__(self, time_func: Optional[TimeFunc] = None, random_func: Optional[RandomFunc] = None, strict: bool = True):
        if time_func is None or random_func is None:
            defaults = Sources.default()
            time_func = time_func if time_func is not None else defaults.time_func
            random_func = random_func if random_func is not None else defaults.random_func
        self.sources = Sources(time_func=time_func, random_func=random_func)
        self.strict = strict

    @classmethod
    def from_config(cls, config: IdxConfig) -> "UlidGenerator":
        sources = Sources.default(config.random_source)
        return cls(time_func=sources.time_func, random_func=sources.random_func, strict=config.strict_time_range)

    def set_time_provider(self, fn: TimeFunc) -> bool:
        require_callable(fn, "time provider")
        self.sources.time_func = fn
        logger.debug("time provider set to %r", fn)
        return True

    def set_random_provider(self, fn: RandomFunc) -> bool:
        require_callable(fn, "random provider")
        self.sources.random_func = fn
        logger.debug("random provider set to %r", fn)
        return True

    def encode_time_field(self, time: Optional[float] = None, length: int = TIME_LEN) -> str:
        if time is None:
            time = self.sources.time_func()
        if not math.isfinite(time):
            raise TimestampRangeError(f"timestamp {time!r} is not a finite number", length=length)
        ms = math.floor(time * 1000)
        if ms < 0:
            raise TimestampRangeError(
                f"timestamp {time!r} is before the unix epoch",
                timestamp_ms=ms,
                length=length,
            )
        if self.strict and ms > max_value(length):
            raise TimestampRangeError(
                f"timestamp {time!r} does not fit in {length} base32 digits",
                timestamp_ms=ms,
                length=length,
                context={"max_ms": max_value(length)},
            )
        return encode(ms, length)

    def encode_random_field(self, length: int = RANDOM_LEN) -> str:
        draw = self.sources.random_func
        return "".join(ENCODING[math.floor(draw() * ENCODING_LEN)] for _ in range(length))

    def generate(self, time: Optional[float] = None) -> str:
        return self.encode_time_field(time) + self.encode_random_field()

    def generate_many(self, count: int, time: Optional[float] = None) -> List[str]:
        return [self.generate(time) for _ in range(count)]


_default_generator: Optional[UlidGenerator] = None


def default_generator() -> UlidGenerator:
    """Process-wide generator behind the module level functions.

    Built from environment variables on first use. `.env` files are only
    read by the CLI and the HTTP API.
    """
    global _default_generator
    if _default_generator is None:
        _default_generator = UlidGenerator.from_config(load_config(use_dotenv=False))
    return _default_generator


def configure(config: IdxConfig) -> UlidGenerator:
    """Replace the process-wide generator with one built from `config`."""
    global _default_generator
    _default_generator = UlidGenerator.from_config(config)
    return _default_generator


def set_time_provider(fn: TimeFunc) -> bool:
    return default_generator().set_time_provider(fn)


def set_random_provider(fn: RandomFunc) -> bool:
    return default_generator().set_random_provider(fn)


def encode_time_field(time: Optional[float] = None, length: int = TIME_LEN) -> str:
    return default_generator().encode_time_field(time, length)


def encode_random_field(length: int = RANDOM_LEN) -> str:
    return default_generator().encode_random_field(length)


def generate(time: Optional[float] = None) -> str:
    return default_generator().generate(time)
