# topmark:header:start
#
#   project      : Deprecations
#   file         : default.py
#   file_relpath : src/deprecations/registry/default.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The process default registry used by the module-level API.

Libraries that cannot thread a `DeprecationRegistry` through their call sites use
the functions in `deprecations`, which delegate to the registry returned by
`get_registry`. Applications and tests may swap it out.

Warning:
    The default registry is global state shared across the process. In tests,
    prefer `use_registry` (or the pytest plugin fixtures), which restore the
    previous registry on exit.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

from deprecations.registry.registry import DeprecationRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator

_lock = threading.Lock()
_default: DeprecationRegistry = DeprecationRegistry()


def get_registry() -> DeprecationRegistry:
    """Return the process default registry."""
    return _default


def set_registry(registry: DeprecationRegistry) -> DeprecationRegistry:
    """Install ``registry`` as the process default.

    Returns:
        DeprecationRegistry: The previously installed registry.
    """
    global _default
    with _lock:
        previous: DeprecationRegistry = _default
        _default = registry
    return previous


@contextmanager
def use_registry(registry: DeprecationRegistry | None = None) -> Iterator[DeprecationRegistry]:
    """Temporarily install ``registry`` (or a fresh one) as the process default.

    Yields:
        DeprecationRegistry: The installed registry.
    """
    installed: DeprecationRegistry = registry if registry is not None else DeprecationRegistry()
    previous: DeprecationRegistry = set_registry(installed)
    try:
        yield installed
    finally:
        set_registry(previous)
