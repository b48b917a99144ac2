# topmark:header:start
#
#   project      : Deprecations
#   file         : test_called_from_outside.py
#   file_relpath : tests/registry/test_called_from_outside.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`trigger_if_called_from_outside` on fixed call chains and on the real stack.

The real-stack tests import the fixture packages under ``tests/fixtures``:
``acme_foo.bar.Bar.old_func`` is deprecated and ``Bar.new_func`` still calls it.
Because those fixtures live below ``tests/``, the registry is built with
``test_dirs=()`` unless the test is about the test-directory exemption.
"""

from __future__ import annotations

import importlib
import inspect
from types import ModuleType

import pytest

from deprecations.core.categories import PackageDeprecationWarning
from deprecations.registry.default import use_registry
from deprecations.registry.registry import DeprecationRegistry
from tests.conftest import RecordingLogger, fixed_registry, loc

BAR = loc("/site/vendor/acme/foo/bar.py", 16, "acme.foo.bar")
BAZ = loc("/site/vendor/acme/foo/baz.py", 9, "acme.foo.baz")
APP = loc("/srv/app/service.py", 14, "service")


def test_external_caller_is_delivered(recording_logger: RecordingLogger) -> None:
    """Application code calling a deprecated entry point is warned."""
    reg = fixed_registry(BAR, APP)
    reg.enable_with_logger(recording_logger)

    reg.trigger_if_called_from_outside("acme/foo", "link", "Bar.old() is deprecated.")

    assert len(recording_logger.calls) == 1
    assert reg.get_triggered_deprecations() == {"link": 1}


def test_internal_caller_is_neither_delivered_nor_counted(
    recording_logger: RecordingLogger,
) -> None:
    """A package calling its own deprecated code is invisible."""
    reg = fixed_registry(BAR, BAZ)
    reg.enable_with_logger(recording_logger)

    reg.trigger_if_called_from_outside("acme/foo", "link", "msg")

    assert recording_logger.calls == []
    assert reg.get_unique_triggered_deprecations_count() == 0


def test_notice_from_outside_the_package_is_ignored(recording_logger: RecordingLogger) -> None:
    """The heuristic only applies to notices raised by the declaring package."""
    reg = fixed_registry(APP, loc("/srv/app/main.py"))
    reg.enable_with_logger(recording_logger)

    reg.trigger_if_called_from_outside("acme/foo", "link", "msg")

    assert recording_logger.calls == []


def test_warning_names_both_frames() -> None:
    """The warning suffix names the deprecated code and its caller."""
    reg = fixed_registry(BAR, APP)
    reg.enable_with_trigger_error()

    with pytest.warns(PackageDeprecationWarning) as record:
        reg.trigger_if_called_from_outside("acme/foo", "https://github.com/acme/foo", "Old.")

    assert str(record[0].message) == (
        "Old. (bar.py:16 called by service.py:14, https://github.com/acme/foo, package acme/foo)"
    )


@pytest.fixture
def consumer(fixtures_on_path: object) -> ModuleType:
    """The downstream ``consumer`` fixture module."""
    return importlib.import_module("consumer")


def test_real_stack_external_call_is_delivered(consumer: ModuleType) -> None:
    """Downstream code reaching the deprecated method is warned."""
    reg = DeprecationRegistry(test_dirs=())
    reg.enable_with_trigger_error()

    with use_registry(reg), pytest.warns(PackageDeprecationWarning) as record:
        consumer.trigger_dependency_with_deprecation()

    message = str(record[0].message)
    assert message.startswith("Bar.old_func() is deprecated, use Bar.new_func() instead. (bar.py:")
    assert " called by consumer.py:" in message
    assert message.endswith(", https://github.com/acme/foo/issues/1, package acme_foo)")
    assert record[0].filename.endswith("bar.py")


def test_real_stack_internal_call_is_silent(consumer: ModuleType) -> None:
    """``Bar.new_func`` delegating to ``Bar.old_func`` triggers nothing."""
    reg = DeprecationRegistry(test_dirs=())
    reg.enable_with_trigger_error()

    with use_registry(reg):
        consumer.trigger_dependency_with_deprecation_from_inside()

    assert reg.get_unique_triggered_deprecations_count() == 0


def test_real_stack_internal_class_is_silent(fixtures_on_path: object) -> None:
    """Another class of the same package using the deprecated method is silent."""
    bar_module = importlib.import_module("acme_foo.bar")
    reg = DeprecationRegistry(test_dirs=())
    reg.enable_with_trigger_error()

    with use_registry(reg):
        bar_module.Baz().using_old_func()

    assert reg.get_unique_triggered_deprecations_count() == 0


def test_real_stack_test_directory_is_exempt(consumer: ModuleType) -> None:
    """With the default test dirs, callers under ``tests/`` always count as external."""
    reg = DeprecationRegistry()
    reg.enable_with_trigger_error()

    with use_registry(reg), pytest.warns(PackageDeprecationWarning):
        consumer.trigger_dependency_with_deprecation_from_inside()

    assert reg.get_unique_triggered_deprecations_count() == 1


def test_real_stack_called_directly_from_test(fixtures_on_path: object) -> None:
    """A deprecated module function called from this test is delivered."""
    root_deprecation = importlib.import_module("root_deprecation")
    reg = DeprecationRegistry(test_dirs=())
    reg.enable_with_trigger_error()

    with use_registry(reg), pytest.warns(PackageDeprecationWarning) as record:
        line = inspect.currentframe().f_lineno + 1  # type: ignore[union-attr]
        root_deprecation.run()

    message = str(record[0].message)
    assert message.startswith("this is deprecated foo 1234 (root_deprecation.py:")
    assert f" called by test_called_from_outside.py:{line}," in message
    assert reg.get_unique_triggered_deprecations_count() == 1
