# topmark:header:start
#
#   project      : Deprecations
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the deprecations test suite.

This file sets up global fixtures and the logging configuration for test runs.

Notes:
    Most tests build their own `DeprecationRegistry` (see the `registry`
    fixture) instead of touching the process default registry. Tests exercising
    the module-level API use `use_registry` or the plugin's
    `deprecation_registry` fixture so the default is restored afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from deprecations.config import logging
from deprecations.core.frames import CallerLocation, FixedFrameProvider
from deprecations.registry.registry import DeprecationRegistry

pytest_plugins = ["deprecations.testing.pytest_plugin"]

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

FIXTURES_DIR: Path = Path(__file__).parent / "fixtures"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_deprecations_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell environment does not leak into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("DEPRECATIONS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEPRECATIONS_MODE", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the library log level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@dataclass
class RecordingLogger:
    """Bare structured logger sink recording ``warning`` calls (no ``log`` method)."""

    calls: list[tuple[object, dict[str, object]]] = field(default_factory=list)

    def warning(
        self, msg: object, *args: object, extra: Mapping[str, object] | None = None
    ) -> None:
        self.calls.append((msg, dict(extra or {})))


@pytest.fixture
def registry() -> Iterator[DeprecationRegistry]:
    """A fresh registry reading caller locations from the live stack."""
    reg = DeprecationRegistry()
    yield reg
    reg.disable()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """A structured logger sink that records its calls."""
    return RecordingLogger()


@pytest.fixture
def fixtures_on_path(monkeypatch: pytest.MonkeyPatch) -> Path:
    """Make the fixture packages under ``tests/fixtures`` importable."""
    monkeypatch.syspath_prepend(str(FIXTURES_DIR))
    return FIXTURES_DIR


def loc(file: str, line: int = 1, module: str | None = None) -> CallerLocation:
    """Shorthand for a `CallerLocation`."""
    return CallerLocation(file=file, line=line, module=module)


def fixed_registry(*locations: CallerLocation, **kwargs: Any) -> DeprecationRegistry:
    """Return a registry whose caller locations come from ``locations``."""
    return DeprecationRegistry(frames=FixedFrameProvider(locations), **kwargs)
