# topmark:header:start
#
#   project      : Deprecations
#   file         : __init__.py
#   file_relpath : src/deprecations/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: TOML files, environment variables and library logging.

Submodules import each other directly; this package only re-exports the
configuration model to keep ``import deprecations.config.logging`` cheap.
"""

from __future__ import annotations

from deprecations.config.model import DeprecationsConfig

__all__ = ["DeprecationsConfig"]
