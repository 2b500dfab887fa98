"""Shared fixtures for obscurestring tests."""

import random
from collections.abc import Generator

import pytest

from obscurestring.core.cache import MaskCache
from obscurestring.core.config import EngineConfig, reset_engine_config
from obscurestring.core.executor import StrategyExecutor
from obscurestring.engine import ObscureEngine, reset_default_engine

ENV_VARS = (
    "OBSCURESTRING_CACHE_ENABLED",
    "OBSCURESTRING_CACHE_SIZE",
    "OBSCURESTRING_ASYNC_CHUNK_SIZE",
    "OBSCURESTRING_INPUT_POLICY",
    "OBSCURESTRING_LOG_LEVEL",
    "OBSCURESTRING_LOG_FORMAT",
    "OBSCURESTRING_LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear configuration env vars and the process-wide engine around each test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_engine_config()
    reset_default_engine()
    yield
    reset_engine_config()
    reset_default_engine()


@pytest.fixture
def engine() -> ObscureEngine:
    """Create an engine with default settings and its own cache."""
    return ObscureEngine(config=EngineConfig())


@pytest.fixture
def uncached_engine() -> ObscureEngine:
    """Create an engine that never memoizes results."""
    return ObscureEngine(config=EngineConfig(cache_enabled=False))


@pytest.fixture
def seeded_engine() -> ObscureEngine:
    """Create an engine whose random strategy is reproducible."""
    return ObscureEngine(
        config=EngineConfig(), executor=StrategyExecutor(rng=random.Random(42))
    )


@pytest.fixture
def small_cache() -> MaskCache:
    """Create a cache holding at most three entries."""
    return MaskCache(max_size=3)


@pytest.fixture
def sample_secrets() -> list[str]:
    """Strings of assorted shapes used across tests."""
    return [
        "mysecretkey",
        "john@example.com",
        "4111-1111-1111-1111",
        "+1 (555) 123-4567",
        "sk_live_abcdefghijklmnop",
    ]
