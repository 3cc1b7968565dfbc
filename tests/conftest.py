"""Pytest configuration and shared fixtures for simplechalk tests."""

import os
from collections.abc import Callable, Iterator
from typing import Any

import pytest

import simplechalk
from simplechalk.config.defaults import DISABLE_ENV_VARS, FORCE_ENV_VAR
from simplechalk.models.config import ColorSettings


@pytest.fixture
def isolated_env() -> Iterator[dict[str, str]]:
    """Provide an environment without color signals.

    Saves current environment, removes NO_COLOR, MCP_MODE and FORCE_COLOR,
    and restores everything after the test.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    for name in (*DISABLE_ENV_VARS, FORCE_ENV_VAR):
        os.environ.pop(name, None)
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def make_settings() -> Callable[..., ColorSettings]:
    """Factory for ColorSettings built from explicit signals.

    Returns:
        Callable accepting env vars as keyword arguments plus ``tty`` and
        ``browser``.
    """

    def _make(
        tty: bool = False, browser: dict[str, Any] | None = None, **env: str
    ) -> ColorSettings:
        return ColorSettings(env=env, is_tty=tty, browser=browser)

    return _make


@pytest.fixture
def forced(make_settings: Callable[..., ColorSettings]) -> ColorSettings:
    """Terminal settings with FORCE_COLOR set."""
    return make_settings(FORCE_COLOR="1")


@pytest.fixture
def browser_settings(make_settings: Callable[..., ColorSettings]) -> ColorSettings:
    """Settings for a browser host with styling enabled."""
    return make_settings(browser={"window": object(), "document": object()})


@pytest.fixture
def reset_defaults() -> Iterator[None]:
    """Clear the cached module-level instances before and after a test."""
    factories = (
        simplechalk._default_chalk,
        simplechalk._default_fast,
        simplechalk._default_browser,
    )
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()


def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
