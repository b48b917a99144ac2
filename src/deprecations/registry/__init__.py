# topmark:header:start
#
#   project      : Deprecations
#   file         : __init__.py
#   file_relpath : src/deprecations/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deprecation registry and the process default instance."""

from __future__ import annotations

from deprecations.registry.default import get_registry, set_registry, use_registry
from deprecations.registry.registry import DeprecationRegistry

__all__ = [
    "DeprecationRegistry",
    "get_registry",
    "set_registry",
    "use_registry",
]
