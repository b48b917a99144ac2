# topmark:header:start
#
#   project      : Deprecations
#   file         : registry.py
#   file_relpath : src/deprecations/registry/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The deprecation registry.

A `DeprecationRegistry` decides, for every triggered deprecation, whether the
notice is delivered and where to. It holds:

- the active delivery backends (see `Backend`) and the optional logger sink;
- the occurrence counter of every deprecation link seen in the current tracking
  epoch (between two `disable` calls);
- ignored packages, silenced links and, per thread, the depth of nested
  suppression scopes.

Counting is authoritative: a triggered deprecation is counted even when it is
deduplicated, ignored or suppressed, so tests can assert on it regardless of
the delivery configuration.

Typical usage:
    ```python
    from deprecations import DeprecationRegistry

    registry = DeprecationRegistry()
    registry.enable_with_trigger_error()
    registry.trigger(
        "acme/orm",
        "https://github.com/acme/orm/issues/1234",
        "Passing %s to %s() is deprecated.",
        "None",
        "connect",
    )
    ```

All mutations are guarded by a single re-entrant lock. Delivery to the sinks
happens outside the lock.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from deprecations.config.logging import get_logger
from deprecations.constants import DEFAULT_TEST_DIRS
from deprecations.core.backends import Backend, DeprecationSeverity
from deprecations.core.classify import is_called_from_outside
from deprecations.core.frames import StackFrameProvider
from deprecations.core.sinks import WarningSink, log_notice
from deprecations.core.versions import compare_versions

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from deprecations.config.logging import DeprecationsLogger
    from deprecations.core.frames import CallerLocation, FrameProvider
    from deprecations.core.sinks import LoggerSink

logger: DeprecationsLogger = get_logger(__name__)

T = TypeVar("T")


class _ScopeState(threading.local):
    """Suppression scopes opened by the current thread."""

    def __init__(self) -> None:
        self.epoch: int = -1
        self.depth: int = 0


@dataclass(frozen=True)
class _Delivery:
    """Snapshot of what a single notice must be delivered to."""

    backends: Backend
    severity: DeprecationSeverity
    log_sink: LoggerSink | None


class DeprecationRegistry:
    """Backend configuration, counters and suppression state for deprecations.

    Args:
        frames: Source of caller locations; defaults to the live interpreter stack.
        test_dirs: Directory names whose callers are always treated as external by
            `trigger_if_called_from_outside`.
        track_when_disabled: If False, `trigger` returns without counting while no
            backend at all (not even `Backend.TRACK`) is enabled.
    """

    def __init__(
        self,
        *,
        frames: FrameProvider | None = None,
        test_dirs: Collection[str] = DEFAULT_TEST_DIRS,
        track_when_disabled: bool = True,
        warning_sink: WarningSink | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._frames: FrameProvider = frames if frames is not None else StackFrameProvider()
        self._warning_sink: WarningSink = warning_sink if warning_sink is not None else WarningSink()
        self.test_dirs: tuple[str, ...] = tuple(test_dirs)
        self.track_when_disabled: bool = track_when_disabled

        self._backends: Backend = Backend.NONE
        self._log_sink: LoggerSink | None = None
        self._deduplication: bool = True
        self._severity: DeprecationSeverity = DeprecationSeverity.DEPRECATED

        self._ignored_packages: dict[str, str | None] = {}
        self._counters: dict[str, int] = {}
        self._silenced_links: set[str] = set()

        self._scopes: _ScopeState = _ScopeState()
        self._epoch: int = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(backends={self._backends!r}, "
            f"deduplication={self._deduplication}, tracked={len(self._counters)})"
        )

    # --- Backend configuration ---

    @property
    def backends(self) -> Backend:
        """Return the currently enabled backends."""
        return self._backends

    @property
    def severity(self) -> DeprecationSeverity:
        """Return the severity used for delivered notices."""
        return self._severity

    @property
    def deduplication(self) -> bool:
        """Return True if repeated links are delivered only once per epoch."""
        return self._deduplication

    @property
    def log_sink(self) -> LoggerSink | None:
        """Return the logger used by the log backend, if enabled."""
        return self._log_sink

    def enable_with_trigger_error(self, severity: DeprecationSeverity | None = None) -> None:
        """Deliver notices as process-level warnings.

        Replaces the suppressed warning variant if it was enabled.
        """
        with self._lock:
            self._backends = (self._backends & ~Backend.SUPPRESSED_WARN) | Backend.WARN
            if severity is not None:
                self._severity = severity
        logger.debug("Enabled warning backend (%s)", self._severity.value)

    def enable_with_suppressed_trigger_error(
        self, severity: DeprecationSeverity | None = None
    ) -> None:
        """Deliver notices as process-level warnings that never raise.

        If the warning filters turn the notice into an exception, the exception
        is discarded. Replaces the plain warning variant if it was enabled.
        """
        with self._lock:
            self._backends = (self._backends & ~Backend.WARN) | Backend.SUPPRESSED_WARN
            if severity is not None:
                self._severity = severity
        logger.debug("Enabled suppressed warning backend (%s)", self._severity.value)

    def enable_with_logger(self, log_sink: LoggerSink) -> None:
        """Deliver notices to a structured logger such as a `logging.Logger`."""
        with self._lock:
            self._backends |= Backend.LOG
            self._log_sink = log_sink
        logger.debug("Enabled log backend: %r", log_sink)

    def enable_tracking_deprecations(self) -> None:
        """Count deprecations without delivering them."""
        with self._lock:
            self._backends |= Backend.TRACK

    def enable(self, backends: Backend, *, log_sink: LoggerSink | None = None) -> None:
        """Enable several backends at once.

        Raises:
            ValueError: If both warning variants are requested, or if the log
                backend is requested without a sink.
        """
        if Backend.WARN in backends and Backend.SUPPRESSED_WARN in backends:
            raise ValueError("Backends WARN and SUPPRESSED_WARN are mutually exclusive")
        sink: LoggerSink | None = log_sink if log_sink is not None else self._log_sink
        if Backend.LOG in backends and sink is None:
            raise ValueError("The LOG backend requires a logger")
        if Backend.WARN in backends:
            self.enable_with_trigger_error()
        if Backend.SUPPRESSED_WARN in backends:
            self.enable_with_suppressed_trigger_error()
        if Backend.LOG in backends and sink is not None:
            self.enable_with_logger(sink)
        if Backend.TRACK in backends:
            self.enable_tracking_deprecations()

    def set_severity(self, severity: DeprecationSeverity) -> None:
        """Set the severity used for delivered notices."""
        with self._lock:
            self._severity = severity

    def without_deduplication(self) -> None:
        """Deliver every occurrence, not just the first one per link."""
        with self._lock:
            self._deduplication = False

    def with_deduplication(self) -> None:
        """Deliver only the first occurrence per link (the default)."""
        with self._lock:
            self._deduplication = True

    def disable(self) -> None:
        """Disable all backends and start a new tracking epoch.

        Counters are zeroed but their keys are kept, so links registered with
        `ignore_deprecations` stay known. Ignored packages and silenced links
        survive; deduplication is switched back on. Active suppression scopes are
        released: their eventual exit no longer changes the suppression depth.

        Never raises; safe to call from cleanup code.
        """
        with self._lock:
            self._backends = Backend.NONE
            self._log_sink = None
            self._deduplication = True
            self._severity = DeprecationSeverity.DEPRECATED
            for link in self._counters:
                self._counters[link] = 0
            self._epoch += 1

    def reset(self) -> None:
        """Forget everything: counters, ignores, silenced links and backends.

        Intended for test isolation; `disable` is the normal teardown.
        """
        with self._lock:
            self.disable()
            self._counters.clear()
            self._ignored_packages.clear()
            self._silenced_links.clear()

    # --- Ignore management ---

    def ignore_package(self, package: str, version: str | None = None) -> None:
        """Never deliver notices triggered by ``package``.

        Args:
            package (str): The declaring package identifier.
            version (str | None): If given, only notices whose ``since`` version is
                at least ``version`` are ignored (notices without ``since`` are
                always ignored).
        """
        with self._lock:
            self._ignored_packages[package] = version

    def ignore_deprecations(self, *links: str) -> None:
        """Permanently silence the given links.

        Each link is registered with a counter of 0 (if not already counted) and
        is never delivered again; its occurrences are still counted.
        """
        with self._lock:
            for link in links:
                self._counters.setdefault(link, 0)
                self._silenced_links.add(link)

    def is_package_ignored(self, package: str, since: str | None = None) -> bool:
        """Return True if a notice from ``package`` at ``since`` must not be delivered."""
        with self._lock:
            if package not in self._ignored_packages:
                return False
            threshold: str | None = self._ignored_packages[package]
        if threshold is None or since is None:
            return True
        return compare_versions(since, threshold) >= 0

    # --- Scoped suppression ---

    @property
    def suppression_depth(self) -> int:
        """Return the number of suppression scopes open in the current thread."""
        with self._lock:
            return self._scope_depth()

    def _scope_depth(self) -> int:
        # Scopes opened before the last disable() no longer count.
        if self._scopes.epoch != self._epoch:
            return 0
        return self._scopes.depth

    @contextmanager
    def ignoring_deprecations(self) -> Iterator[None]:
        """Suppress delivery (not counting) for the extent of the ``with`` block.

        Scopes nest; delivery resumes when the outermost scope exits, on both
        normal and exceptional exit. A scope only covers the thread that opened
        it: triggers from other threads are delivered as usual.
        """
        with self._lock:
            if self._scopes.epoch != self._epoch:
                self._scopes.epoch = self._epoch
                self._scopes.depth = 0
            self._scopes.depth += 1
            epoch: int = self._epoch
        try:
            yield
        finally:
            with self._lock:
                # A disable() inside the scope already released it.
                if self._scopes.epoch == epoch and self._scopes.depth > 0:
                    self._scopes.depth -= 1

    def run_ignoring_deprecations(self, work: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call ``work(*args, **kwargs)`` with deprecation delivery suppressed.

        Returns:
            T: Whatever ``work`` returns. Exceptions propagate unchanged.
        """
        with self.ignoring_deprecations():
            return work(*args, **kwargs)

    # --- Triggering ---

    def trigger(
        self,
        package: str,
        link: str,
        message: str,
        *args: object,
        since: str | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Record a deprecation and deliver it to the enabled backends.

        The link identifies the deprecation (conventionally the URL of an issue
        or upgrade note) and is the deduplication key.

        Args:
            package (str): Identifier of the package declaring the deprecation.
            link (str): Stable identifier of this deprecation.
            message (str): printf-style message template.
            *args (object): Values substituted into ``message`` with ``%``.
            since (str | None): Version of ``package`` that introduced the deprecation.
            stacklevel (int): Which frame the notice is attributed to; 1 is the
                code calling this method.

        Raises:
            TypeError: If ``args`` do not match the placeholders in ``message``.
        """
        delivery: _Delivery | None = self._record(package, link, since)
        if delivery is None:
            return
        text: str = message % args if args else message
        callee: CallerLocation | None = self._frames.locate(stacklevel)
        caller: CallerLocation | None = self._frames.locate(stacklevel + 1)
        self._deliver(delivery, text, package, link, since, callee, caller)

    def trigger_if_called_from_outside(
        self,
        package: str,
        link: str,
        message: str,
        *args: object,
        since: str | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Like `trigger`, but only when the deprecated code was called from outside ``package``.

        Calls from within ``package`` itself (for example one deprecated method
        delegating to another) are neither counted nor delivered. Calls from a
        test directory always count as external.
        """
        callee: CallerLocation | None = self._frames.locate(stacklevel)
        caller: CallerLocation | None = self._frames.locate(stacklevel + 1)
        if not is_called_from_outside(package, callee, caller, self.test_dirs):
            return
        delivery: _Delivery | None = self._record(package, link, since)
        if delivery is None:
            return
        text: str = message % args if args else message
        self._deliver(delivery, text, package, link, since, callee, caller)

    def _record(self, package: str, link: str, since: str | None) -> _Delivery | None:
        """Count one occurrence of ``link`` and decide whether to deliver it.

        Returns:
            _Delivery | None: What to deliver to, or ``None`` if nothing is.
        """
        with self._lock:
            if not self._backends and not self.track_when_disabled:
                return None

            count: int = self._counters.get(link, 0) + 1
            self._counters[link] = count

            if self._deduplication and count > 1:
                return None
            if link in self._silenced_links:
                logger.trace("%s: silenced link", link)
                return None
            if self.is_package_ignored(package, since):
                logger.trace("%s: package %s is ignored", link, package)
                return None
            if self._scope_depth() > 0:
                logger.trace("%s: suppressed by an active scope", link)
                return None

            active: Backend = self._backends & Backend.delivering()
            if not active:
                return None
            return _Delivery(backends=active, severity=self._severity, log_sink=self._log_sink)

    def _deliver(
        self,
        delivery: _Delivery,
        text: str,
        package: str,
        link: str,
        since: str | None,
        callee: CallerLocation | None,
        caller: CallerLocation | None,
    ) -> None:
        """Send a formatted notice to every backend in ``delivery``."""
        if delivery.backends & (Backend.WARN | Backend.SUPPRESSED_WARN):
            full: str = text + format_suffix(package, link, since, callee, caller)
            if Backend.SUPPRESSED_WARN in delivery.backends:
                discarded: Warning | None = self._warning_sink.try_emit(
                    full, delivery.severity, callee
                )
                if discarded is not None:
                    logger.trace("Discarded warning raised by filters: %r", discarded)
            else:
                self._warning_sink.emit(full, delivery.severity, callee)

        if Backend.LOG in delivery.backends and delivery.log_sink is not None:
            log_notice(
                delivery.log_sink,
                text,
                notice_fields(package, link, since, callee),
                delivery.severity.log_level,
            )

    # --- Query API ---

    def get_unique_triggered_deprecations_count(self) -> int:
        """Return the total number of occurrences across all tracked links."""
        with self._lock:
            return sum(self._counters.values())

    def get_triggered_deprecations(self) -> dict[str, int]:
        """Return a copy of the link -> occurrence count mapping."""
        with self._lock:
            return dict(self._counters)

    def get_ignored_packages(self) -> dict[str, str | None]:
        """Return a copy of the ignored package -> version threshold mapping."""
        with self._lock:
            return dict(self._ignored_packages)

    def get_silenced_links(self) -> frozenset[str]:
        """Return the links silenced with `ignore_deprecations`."""
        with self._lock:
            return frozenset(self._silenced_links)


def format_suffix(
    package: str,
    link: str,
    since: str | None,
    callee: CallerLocation | None,
    caller: CallerLocation | None,
) -> str:
    """Return the location suffix appended to warning messages.

    Example: ``" (bar.py:16 called by foo.py:14, https://..., package acme/foo)"``.
    """
    parts: list[str] = []
    if callee is not None:
        where: str = str(callee)
        if caller is not None:
            where += f" called by {caller}"
        parts.append(where)
    parts.append(link)
    parts.append(f"package {package}")
    if since:
        parts.append(f"since {since}")
    return f" ({', '.join(parts)})"


def notice_fields(
    package: str,
    link: str,
    since: str | None,
    callee: CallerLocation | None,
) -> Mapping[str, object]:
    """Return the named fields sent to the log backend."""
    fields: dict[str, object] = {
        "file": callee.file if callee is not None else None,
        "line": callee.line if callee is not None else None,
        "package": package,
        "link": link,
    }
    if since is not None:
        fields["since"] = since
    return fields
