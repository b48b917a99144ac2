# topmark:header:start
#
#   project      : Deprecations
#   file         : sinks.py
#   file_relpath : src/deprecations/core/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delivery sinks: process warnings and structured loggers.

`WarningSink` emits notices through the ``warnings`` module at an explicit
location, so filters and ``-W`` options apply as for any other warning.
`LoggerSink` is the shape the registry needs from a structured logger; any
`logging.Logger` qualifies.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from deprecations.core.backends import DeprecationSeverity
    from deprecations.core.frames import CallerLocation


@runtime_checkable
class LoggerSink(Protocol):
    """Structured logger accepted by the log backend."""

    def warning(self, msg: object, *args: object, extra: Mapping[str, object] | None = None) -> None:
        """Record ``msg`` with the named fields in ``extra``."""
        ...


class WarningSink:
    """Emit deprecation notices as process-level warnings."""

    def emit(
        self,
        message: str,
        severity: DeprecationSeverity,
        location: CallerLocation | None = None,
    ) -> None:
        """Emit ``message`` with the category of ``severity``.

        Any exception produced by the active warning filters (``error`` action)
        propagates to the caller.
        """
        category: type[Warning] = severity.category
        if location is None:
            warnings.warn(message, category, stacklevel=2)
            return
        warnings.warn_explicit(
            message,
            category,
            filename=location.file,
            lineno=location.line,
            module=location.module,
        )

    def try_emit(
        self,
        message: str,
        severity: DeprecationSeverity,
        location: CallerLocation | None = None,
    ) -> Warning | None:
        """Emit like `emit`, but return a raised warning instead of propagating it.

        Returns:
            Warning | None: The warning raised by an ``error`` filter, or ``None``
            if the warning was emitted (or filtered out) normally.
        """
        try:
            self.emit(message, severity, location)
        except Warning as exc:
            return exc
        return None


def log_notice(
    sink: LoggerSink | Any,
    message: str,
    fields: Mapping[str, object],
    level: int,
) -> None:
    """Send ``message`` and ``fields`` to ``sink`` at ``level``.

    Loggers with a ``log(level, msg, extra=...)`` method (such as
    `logging.Logger`) receive the severity's level; bare sinks only get
    ``warning``.
    """
    log = getattr(sink, "log", None)
    if callable(log):
        log(level, message, extra=dict(fields))
    else:
        sink.warning(message, extra=dict(fields))
