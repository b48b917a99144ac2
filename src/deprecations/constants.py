# topmark:header:start
#
#   project      : Deprecations
#   file         : constants.py
#   file_relpath : src/deprecations/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deprecations Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    DEPRECATIONS_VERSION: str = get_version("deprecations")
except PackageNotFoundError:  # running from a source checkout
    DEPRECATIONS_VERSION = "0.0.0"

# Environment variables
ENV_MODE: Final[str] = "DEPRECATIONS_MODE"
ENV_LOG_LEVEL: Final[str] = "DEPRECATIONS_LOG_LEVEL"

# Configuration files, in lookup order within a directory
CONFIG_FILE_NAME: Final[str] = "deprecations.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# Directory names whose callers are always treated as external
DEFAULT_TEST_DIRS: Final[tuple[str, ...]] = ("tests",)

# Logger used by the `log` backend when configured by name only
DEFAULT_NOTICE_LOGGER: Final[str] = "deprecations.notices"
