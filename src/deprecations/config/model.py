# topmark:header:start
#
#   project      : Deprecations
#   file         : model.py
#   file_relpath : src/deprecations/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable configuration snapshot for a deprecation registry.

`DeprecationsConfig` is built from a TOML table (`from_dict`), optionally
overridden by the environment (`merged_with_env`), and applied to a registry by
[`apply_config`][deprecations.config.apply.apply_config].
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from deprecations.config.keys import Toml
from deprecations.constants import DEFAULT_NOTICE_LOGGER, DEFAULT_TEST_DIRS, ENV_MODE
from deprecations.core.backends import Backend, DeprecationSeverity

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

TomlTable = dict[str, Any]


def _string_list(data: Mapping[str, Any], key: str) -> tuple[str, ...] | None:
    value: Any = data.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ValueError(f"'{key}' must be a string or a list of strings, got {value!r}")


def _ignore_packages(value: Any) -> dict[str, str | None]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{Toml.SECTION_IGNORE_PACKAGES}' must be a table, got {value!r}")
    result: dict[str, str | None] = {}
    for package, threshold in value.items():
        if threshold is True:
            result[package] = None
        elif threshold is False:
            continue
        elif isinstance(threshold, str) and threshold.strip():
            result[package] = threshold.strip()
        else:
            raise ValueError(
                f"'{Toml.SECTION_IGNORE_PACKAGES}.{package}' must be true, false "
                f"or a version string, got {threshold!r}"
            )
    return result


@dataclass(frozen=True)
class DeprecationsConfig:
    """Settings applied to a `DeprecationRegistry`.

    Attributes:
        backends: Delivery backends to enable.
        deduplicate: Deliver each link only once per tracking epoch.
        severity: Warning category / log level of delivered notices.
        logger: Name of the logger used when the ``log`` backend is enabled.
        test_dirs: Directory names always treated as external callers.
        ignore_links: Links silenced permanently.
        ignore_packages: Package -> minimum ``since`` version to ignore (``None``: all).
        source: File the configuration was read from, if any.
    """

    backends: Backend = Backend.NONE
    deduplicate: bool = True
    severity: DeprecationSeverity = DeprecationSeverity.DEPRECATED
    logger: str = DEFAULT_NOTICE_LOGGER
    test_dirs: tuple[str, ...] = DEFAULT_TEST_DIRS
    ignore_links: tuple[str, ...] = ()
    ignore_packages: Mapping[str, str | None] = field(
        default_factory=lambda: MappingProxyType({})
    )
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: Path | None = None) -> DeprecationsConfig:
        """Build a configuration from a ``[tool.deprecations]``-shaped table.

        Missing keys keep their defaults.

        Raises:
            ValueError: If a value has the wrong type or an unknown name.
        """
        defaults = cls()

        backend_names: tuple[str, ...] | None = _string_list(data, Toml.KEY_BACKENDS)
        backends: Backend = (
            Backend.from_names(backend_names) if backend_names is not None else defaults.backends
        )

        deduplicate: Any = data.get(Toml.KEY_DEDUPLICATE, defaults.deduplicate)
        if not isinstance(deduplicate, bool):
            raise ValueError(f"'{Toml.KEY_DEDUPLICATE}' must be a boolean, got {deduplicate!r}")

        severity_name: Any = data.get(Toml.KEY_SEVERITY)
        if severity_name is not None and not isinstance(severity_name, str):
            raise ValueError(f"'{Toml.KEY_SEVERITY}' must be a string, got {severity_name!r}")
        severity: DeprecationSeverity = (
            DeprecationSeverity.from_name(severity_name) if severity_name else defaults.severity
        )

        logger_name: Any = data.get(Toml.KEY_LOGGER, defaults.logger)
        if not isinstance(logger_name, str) or not logger_name:
            raise ValueError(f"'{Toml.KEY_LOGGER}' must be a non-empty string, got {logger_name!r}")

        test_dirs: tuple[str, ...] | None = _string_list(data, Toml.KEY_TEST_DIRS)
        ignore_links: tuple[str, ...] | None = _string_list(data, Toml.KEY_IGNORE_LINKS)

        return cls(
            backends=backends,
            deduplicate=deduplicate,
            severity=severity,
            logger=logger_name,
            test_dirs=test_dirs if test_dirs is not None else defaults.test_dirs,
            ignore_links=ignore_links if ignore_links is not None else defaults.ignore_links,
            ignore_packages=MappingProxyType(
                _ignore_packages(data.get(Toml.SECTION_IGNORE_PACKAGES))
            ),
            source=source,
        )

    def to_dict(self) -> TomlTable:
        """Return the configuration as a TOML-compatible table."""
        return {
            Toml.KEY_BACKENDS: self.backends.names(),
            Toml.KEY_DEDUPLICATE: self.deduplicate,
            Toml.KEY_SEVERITY: self.severity.value,
            Toml.KEY_LOGGER: self.logger,
            Toml.KEY_TEST_DIRS: list(self.test_dirs),
            Toml.KEY_IGNORE_LINKS: list(self.ignore_links),
            Toml.SECTION_IGNORE_PACKAGES: {
                package: True if threshold is None else threshold
                for package, threshold in self.ignore_packages.items()
            },
        }

    def merged_with_env(self, environ: Mapping[str, str] | None = None) -> DeprecationsConfig:
        """Return a copy with ``DEPRECATIONS_MODE`` applied.

        ``DEPRECATIONS_MODE`` is a comma-separated list of backend names
        (``warn,log``) that replaces the configured backends.

        Raises:
            ValueError: If the variable names an unknown backend.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        mode: str | None = env.get(ENV_MODE)
        if mode is None or not mode.strip():
            return self
        return replace(self, backends=Backend.from_names(mode.split(",")))
