# topmark:header:start
#
#   project      : Deprecations
#   file         : backends.py
#   file_relpath : src/deprecations/core/backends.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delivery backends and notice severities.

`Backend` is a flag set: several backends may be active at once. The two warning
variants are mutually exclusive; the registry enforces that when enabling them.

`DeprecationSeverity` selects the warning category and the log level used when a
notice is delivered.
"""

from __future__ import annotations

import logging
from enum import Enum, Flag
from typing import TYPE_CHECKING

from deprecations.core.categories import (
    PackageDeprecationWarning,
    PackageFutureWarning,
    PackagePendingDeprecationWarning,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


class Backend(Flag):
    """Delivery modes of the deprecation registry.

    Attributes:
        NONE: Nothing enabled.
        TRACK: Counting only; never delivers.
        WARN: Emit a process-level warning.
        SUPPRESSED_WARN: Emit a process-level warning, discarding any error it raises.
        LOG: Send the notice to a structured logger.
    """

    NONE = 0
    TRACK = 1
    WARN = 2
    SUPPRESSED_WARN = 4
    LOG = 8

    @classmethod
    def delivering(cls) -> Backend:
        """Return the union of the backends that actually deliver notices."""
        return cls.WARN | cls.SUPPRESSED_WARN | cls.LOG

    @classmethod
    def from_name(cls, name: str) -> Backend:
        """Return the backend for a lower-case name such as ``"suppressed_warn"``.

        Raises:
            ValueError: If ``name`` is not a known backend.
        """
        key: str = name.strip().upper().replace("-", "_")
        member: Backend | None = cls.__members__.get(key)
        if member is None:
            known: str = ", ".join(m.lower() for m in cls.__members__)
            raise ValueError(f"Unknown deprecation backend {name!r} (expected one of: {known})")
        return member

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Backend:
        """Combine several backend names into one flag set."""
        result: Backend = cls.NONE
        for name in names:
            if name.strip():
                result |= cls.from_name(name)
        if Backend.WARN in result and Backend.SUPPRESSED_WARN in result:
            raise ValueError("Backends 'warn' and 'suppressed_warn' are mutually exclusive")
        return result

    def names(self) -> list[str]:
        """Return the lower-case names of the members set in this flag."""
        return [(m.name or "").lower() for m in Backend if m.value and m in self]


class DeprecationSeverity(Enum):
    """How loudly a delivered notice is reported."""

    PENDING = "pending"
    DEPRECATED = "deprecated"
    FUTURE = "future"

    @property
    def category(self) -> type[Warning]:
        """Return the warning class emitted for this severity."""
        return {
            DeprecationSeverity.PENDING: PackagePendingDeprecationWarning,
            DeprecationSeverity.DEPRECATED: PackageDeprecationWarning,
            DeprecationSeverity.FUTURE: PackageFutureWarning,
        }[self]

    @property
    def log_level(self) -> int:
        """Return the logging level used by the log backend for this severity."""
        return logging.INFO if self is DeprecationSeverity.PENDING else logging.WARNING

    @classmethod
    def from_name(cls, name: str) -> DeprecationSeverity:
        """Return the severity for a case-insensitive value such as ``"future"``.

        Raises:
            ValueError: If ``name`` is not a known severity.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            known: str = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown deprecation severity {name!r} (expected one of: {known})"
            ) from None
