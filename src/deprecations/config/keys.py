# topmark:header:start
#
#   project      : Deprecations
#   file         : keys.py
#   file_relpath : src/deprecations/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for deprecations configuration.

These keys are read from ``deprecations.toml`` and from ``[tool.deprecations]``
in ``pyproject.toml``. Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by the configuration."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_DEPRECATIONS: Final[str] = "deprecations"

    KEY_BACKENDS: Final[str] = "backends"
    KEY_DEDUPLICATE: Final[str] = "deduplicate"
    KEY_SEVERITY: Final[str] = "severity"
    KEY_LOGGER: Final[str] = "logger"
    KEY_TEST_DIRS: Final[str] = "test_dirs"
    KEY_IGNORE_LINKS: Final[str] = "ignore_links"

    # [ignore_packages]: package = true | "min-version"
    SECTION_IGNORE_PACKAGES: Final[str] = "ignore_packages"
