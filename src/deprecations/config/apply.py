# topmark:header:start
#
#   project      : Deprecations
#   file         : apply.py
#   file_relpath : src/deprecations/config/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Apply a configuration to a registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deprecations.config.loaders import load_config
from deprecations.config.logging import get_logger
from deprecations.core.backends import Backend
from deprecations.registry.default import get_registry

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from deprecations.config.logging import DeprecationsLogger
    from deprecations.config.model import DeprecationsConfig
    from deprecations.registry.registry import DeprecationRegistry

logger: DeprecationsLogger = get_logger(__name__)


def apply_config(registry: DeprecationRegistry, config: DeprecationsConfig) -> None:
    """Configure ``registry`` from ``config``.

    Backends and ignores are added to what the registry already has; call
    `DeprecationRegistry.disable` first for a clean slate.
    """
    registry.set_severity(config.severity)
    if config.deduplicate:
        registry.with_deduplication()
    else:
        registry.without_deduplication()
    registry.test_dirs = tuple(config.test_dirs)

    log_sink = get_logger(config.logger) if Backend.LOG in config.backends else None
    registry.enable(config.backends, log_sink=log_sink)

    for package, threshold in config.ignore_packages.items():
        registry.ignore_package(package, threshold)
    if config.ignore_links:
        registry.ignore_deprecations(*config.ignore_links)
    logger.debug("Applied configuration from %s: %r", config.source or "<defaults>", registry)


def configure_from_environment(
    registry: DeprecationRegistry | None = None,
    *,
    start: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> DeprecationsConfig:
    """Discover the configuration file, apply the environment, configure a registry.

    Args:
        registry: Registry to configure (defaults to the process default).
        start: Directory to start the configuration file lookup from.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        The effective configuration.

    Raises:
        ValueError: If ``DEPRECATIONS_MODE`` names an unknown backend.
    """
    config: DeprecationsConfig = load_config(start=start).merged_with_env(environ)
    apply_config(registry if registry is not None else get_registry(), config)
    return config
