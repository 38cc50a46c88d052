import random
import time
from types import SimpleNamespace

import pytest

from idx import sources
from idx.errors import ConfigurationError, UnavailableSourceError
from idx.sources import Sources, default_time_func, random_func_for, secure_random, unavailable_time


def _fake_clock_info(resolutions):
    def get_clock_info(name):
        if name not in resolutions:
            raise ValueError(f"unknown clock {name}")
        return SimpleNamespace(resolution=resolutions[name])
    return get_clock_info


class TestDefaultTimeFunc:
    def test_prefers_wall_clock_when_fine_enough(self, monkeypatch):
        monkeypatch.setattr(sources.time, "get_clock_info", _fake_clock_info({"time": 1e-9, "perf_counter": 1e-9}))
        assert default_time_func() is time.time

    def test_falls_back_to_anchored_counter(self, monkeypatch):
        monkeypatch.setattr(sources.time, "get_clock_info", _fake_clock_info({"time": 0.0156, "perf_counter": 1e-7}))
        now = default_time_func()
        assert now is not time.time
        assert abs(now() - time.time()) < 1.0

    def test_no_adequate_clock_raises_on_call(self, monkeypatch):
        monkeypatch.setattr(sources.time, "get_clock_info", _fake_clock_info({"time": 1.0}))
        now = default_time_func()
        assert now is unavailable_time
        with pytest.raises(UnavailableSourceError) as exc:
            now()
        assert "millisecond precision" in str(exc.value)
        assert exc.value.source == "time"


class TestRandomSources:
    def test_default_is_stdlib_random(self):
        assert random_func_for("default") is random.random

    def test_secure_is_selectable(self):
        assert random_func_for(" Secure ") is secure_random

    def test_secure_random_in_unit_interval(self):
        for _ in range(200):
            r = secure_random()
            assert 0.0 <= r < 1.0

    def test_unknown_source_rejected(self):
        with pytest.raises(ConfigurationError):
            random_func_for("dice")


class TestSources:
    def test_default_builds_callables(self):
        s = Sources.default()
        assert callable(s.time_func)
        assert s.random_func is random.random

    def test_rejects_non_callables(self):
        with pytest.raises(ConfigurationError):
            Sources(time_func=123, random_func=random.random)
        with pytest.raises(ConfigurationError):
            Sources(time_func=time.time, random_func="random")
