# topmark:header:start
#
#   project      : Deprecations
#   file         : __init__.py
#   file_relpath : src/deprecations/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deprecations package.

Emit, deduplicate and track deprecation notices. Producer packages call
`trigger` (or `trigger_if_called_from_outside`) at deprecated call sites; the
host application decides where notices go:

- `enable_with_trigger_error`: emit a `DeprecationWarning` subclass;
- `enable_with_suppressed_trigger_error`: same, but never raise;
- `enable_with_logger`: send the notice to a structured logger;
- `enable_tracking_deprecations`: count only.

Occurrences are always counted and can be queried with
`get_triggered_deprecations`. The module-level functions operate on the
process default registry (see `deprecations.registry.get_registry`); create a
`DeprecationRegistry` for an isolated instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from deprecations.config.apply import apply_config, configure_from_environment
from deprecations.core.backends import Backend, DeprecationSeverity
from deprecations.core.categories import (
    PackageDeprecationWarning,
    PackageFutureWarning,
    PackagePendingDeprecationWarning,
)
from deprecations.core.frames import CallerLocation, FixedFrameProvider, StackFrameProvider
from deprecations.registry.default import get_registry, set_registry, use_registry
from deprecations.registry.registry import DeprecationRegistry

if TYPE_CHECKING:
    from collections.abc import Callable
    from contextlib import AbstractContextManager

    from deprecations.core.sinks import LoggerSink

T = TypeVar("T")


def trigger(package: str, link: str, message: str, *args: object, since: str | None = None) -> None:
    """Trigger a deprecation on the default registry.

    See `DeprecationRegistry.trigger`.
    """
    get_registry().trigger(package, link, message, *args, since=since, stacklevel=2)


def trigger_if_called_from_outside(
    package: str, link: str, message: str, *args: object, since: str | None = None
) -> None:
    """Trigger a deprecation unless called from within ``package`` itself.

    See `DeprecationRegistry.trigger_if_called_from_outside`.
    """
    get_registry().trigger_if_called_from_outside(
        package, link, message, *args, since=since, stacklevel=2
    )


def run_ignoring_deprecations(work: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run ``work`` with deprecation delivery suppressed on the default registry."""
    return get_registry().run_ignoring_deprecations(work, *args, **kwargs)


def ignoring_deprecations() -> AbstractContextManager[None]:
    """Return a context manager suppressing delivery on the default registry."""
    return get_registry().ignoring_deprecations()


def enable_with_trigger_error(severity: DeprecationSeverity | None = None) -> None:
    """Deliver notices as process-level warnings."""
    get_registry().enable_with_trigger_error(severity)


def enable_with_suppressed_trigger_error(severity: DeprecationSeverity | None = None) -> None:
    """Deliver notices as process-level warnings that never raise."""
    get_registry().enable_with_suppressed_trigger_error(severity)


def enable_with_logger(log_sink: LoggerSink) -> None:
    """Deliver notices to a structured logger."""
    get_registry().enable_with_logger(log_sink)


def enable_tracking_deprecations() -> None:
    """Count deprecations without delivering them."""
    get_registry().enable_tracking_deprecations()


def without_deduplication() -> None:
    """Deliver every occurrence of a deprecation."""
    get_registry().without_deduplication()


def disable() -> None:
    """Disable all backends and zero the occurrence counters."""
    get_registry().disable()


def ignore_package(package: str, version: str | None = None) -> None:
    """Never deliver notices from ``package`` (optionally from ``version`` on)."""
    get_registry().ignore_package(package, version)


def ignore_deprecations(*links: str) -> None:
    """Permanently silence the given deprecation links."""
    get_registry().ignore_deprecations(*links)


def get_unique_triggered_deprecations_count() -> int:
    """Return the total number of occurrences across all tracked links."""
    return get_registry().get_unique_triggered_deprecations_count()


def get_triggered_deprecations() -> dict[str, int]:
    """Return the link -> occurrence count mapping."""
    return get_registry().get_triggered_deprecations()


class Deprecation:
    """Static facade over the default registry.

    Mirrors the module-level functions for code that prefers a single name to
    import; it holds no state of its own.
    """

    @staticmethod
    def trigger(
        package: str, link: str, message: str, *args: object, since: str | None = None
    ) -> None:
        """See `DeprecationRegistry.trigger`."""
        get_registry().trigger(package, link, message, *args, since=since, stacklevel=2)

    @staticmethod
    def trigger_if_called_from_outside(
        package: str, link: str, message: str, *args: object, since: str | None = None
    ) -> None:
        """See `DeprecationRegistry.trigger_if_called_from_outside`."""
        get_registry().trigger_if_called_from_outside(
            package, link, message, *args, since=since, stacklevel=2
        )

    run_ignoring_deprecations = staticmethod(run_ignoring_deprecations)
    enable_with_trigger_error = staticmethod(enable_with_trigger_error)
    enable_with_suppressed_trigger_error = staticmethod(enable_with_suppressed_trigger_error)
    enable_with_logger = staticmethod(enable_with_logger)
    enable_tracking_deprecations = staticmethod(enable_tracking_deprecations)
    without_deduplication = staticmethod(without_deduplication)
    disable = staticmethod(disable)
    ignore_package = staticmethod(ignore_package)
    ignore_deprecations = staticmethod(ignore_deprecations)
    get_unique_triggered_deprecations_count = staticmethod(get_unique_triggered_deprecations_count)
    get_triggered_deprecations = staticmethod(get_triggered_deprecations)


__all__ = [
    "Backend",
    "CallerLocation",
    "Deprecation",
    "DeprecationRegistry",
    "DeprecationSeverity",
    "FixedFrameProvider",
    "PackageDeprecationWarning",
    "PackageFutureWarning",
    "PackagePendingDeprecationWarning",
    "StackFrameProvider",
    "apply_config",
    "configure_from_environment",
    "disable",
    "enable_tracking_deprecations",
    "enable_with_logger",
    "enable_with_suppressed_trigger_error",
    "enable_with_trigger_error",
    "get_registry",
    "get_triggered_deprecations",
    "get_unique_triggered_deprecations_count",
    "ignore_deprecations",
    "ignore_package",
    "ignoring_deprecations",
    "run_ignoring_deprecations",
    "set_registry",
    "trigger",
    "trigger_if_called_from_outside",
    "use_registry",
    "without_deduplication",
]
