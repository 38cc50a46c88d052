from typing import List

# Crockford's Base32, without I, L, O and U
ENCODING = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ENCODING_LEN = len(ENCODING)

TIME_LEN = 10
RANDOM_LEN = 16
ULID_LEN = TIME_LEN + RANDOM_LEN

# Coarsest clock resolution (seconds) the default time source may report.
MIN_CLOCK_RESOLUTION = 0.001

DEFAULT_RANDOM_SOURCE = "default"
SUPPORTED_RANDOM_SOURCES = ["default", "secure"]

DEFAULT_STRICT_TIME_RANGE = True
DEFAULT_MAX_COUNT = 1000

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

ENV_VAR_KEYS: List[str] = [
    "IDX_RANDOM_SOURCE",
    "IDX_STRICT_TIME_RANGE",
    "IDX_MAX_COUNT",
    "IDX_HOST",
    "IDX_PORT",
    "LOG_LEVEL",
]
