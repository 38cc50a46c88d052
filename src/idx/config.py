import json
import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_COUNT,
    DEFAULT_PORT,
    DEFAULT_RANDOM_SOURCE,
    DEFAULT_STRICT_TIME_RANGE,
    SUPPORTED_LOG_LEVELS,
    SUPPORTED_RANDOM_SOURCES,
)
from .errors import ConfigurationError


@dataclass
class IdxConfig:
    """Runtime configuration for generators, the CLI and the API."""
    random_source: str = DEFAULT_RANDOM_SOURCE
    strict_time_range: bool = DEFAULT_STRICT_TIME_RANGE
    max_count: int = DEFAULT_MAX_COUNT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        self.random_source = (self.random_source or DEFAULT_RANDOM_SOURCE).strip().lower()
        if self.random_source not in SUPPORTED_RANDOM_SOURCES:
            raise ConfigurationError(
                f"unknown random source '{self.random_source}'",
                context={"random_source": self.random_source},
            )
        if self.max_count < 1:
            raise ConfigurationError("max_count must be at least 1", context={"max_count": self.max_count})
        self.log_level = (self.log_level or DEFAULT_LOG_LEVEL).strip().upper()
        if self.log_level not in SUPPORTED_LOG_LEVELS:
            raise ConfigurationError(
                f"unknown log level '{self.log_level}', expected one of {', '.join(SUPPORTED_LOG_LEVELS)}",
                context={"log_level": self.log_level},
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


class ConfigurationFactory:
    """Builds IdxConfig from the environment."""

    @staticmethod
    def _load_dotenv() -> None:
        from dotenv import find_dotenv, load_dotenv

        load_dotenv(find_dotenv(usecwd=True), override=False)

    @staticmethod
    def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
        return os.environ.get(key, default)

    @staticmethod
    def _get_env_bool(key: str, default: bool) -> bool:
        value = os.environ.get(key, "").lower()
        if value in ("1", "true", "yes", "on"):
            return True
        elif value in ("0", "false", "no", "off"):
            return False
        return default

    @staticmethod
    def _get_env_int(key: str, default: int) -> int:
        try:
            return int(os.environ.get(key, str(default)))
        except (ValueError, TypeError):
            return default

    @classmethod
    def create_config(cls, use_dotenv: bool = True) -> IdxConfig:
        if use_dotenv:
            cls._load_dotenv()
        return IdxConfig(
            random_source=cls._get_env("IDX_RANDOM_SOURCE", DEFAULT_RANDOM_SOURCE),
            strict_time_range=cls._get_env_bool("IDX_STRICT_TIME_RANGE", DEFAULT_STRICT_TIME_RANGE),
            max_count=cls._get_env_int("IDX_MAX_COUNT", DEFAULT_MAX_COUNT),
            host=cls._get_env("IDX_HOST", DEFAULT_HOST),
            port=cls._get_env_int("IDX_PORT", DEFAULT_PORT),
            log_level=cls._get_env("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


def load_config(use_dotenv: bool = True) -> IdxConfig:
    return ConfigurationFactory.create_config(use_dotenv)
