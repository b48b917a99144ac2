# topmark:header:start
#
#   project      : Deprecations
#   file         : classify.py
#   file_relpath : src/deprecations/core/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide whether a deprecated entry point was reached from outside its package.

A package deprecating one of its functions wants downstream users warned, but
not its own internals (for example a deprecated method delegating to another
deprecated method). Two frames are inspected:

- the *callee*: where the deprecated entry point asked for the notice;
- the *caller*: the code that called that entry point.

Package identifiers are free-form (``acme/foo``, ``acme.foo``, ``acme-foo``); they
are matched against both the frame's module name and its file path.
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import TYPE_CHECKING

from deprecations.config.logging import get_logger
from deprecations.constants import DEFAULT_TEST_DIRS

if TYPE_CHECKING:
    from collections.abc import Collection

    from deprecations.config.logging import DeprecationsLogger
    from deprecations.core.frames import CallerLocation

logger: DeprecationsLogger = get_logger(__name__)

_SEPARATORS_RE: re.Pattern[str] = re.compile(r"[/\\.]+")


def package_parts(package: str) -> list[str]:
    """Split a package identifier into its path components."""
    return [part for part in _SEPARATORS_RE.split(package.strip()) if part]


def is_test_location(location: CallerLocation, test_dirs: Collection[str] = DEFAULT_TEST_DIRS) -> bool:
    """Return True if ``location`` lives under one of the ``test_dirs`` directories."""
    directories = PurePath(location.file).parts[:-1]
    return any(part in test_dirs for part in directories)


def is_inside_package(location: CallerLocation, package: str) -> bool:
    """Return True if ``location`` belongs to the source tree of ``package``.

    Args:
        location (CallerLocation): The frame location to classify.
        package (str): The declaring package identifier.

    Returns:
        bool: True if the frame's module is the package (or a submodule of it),
        or if its file path contains the package's path components.
    """
    parts: list[str] = package_parts(package)
    if not parts:
        return False

    dotted: str = ".".join(part.replace("-", "_") for part in parts)
    module: str | None = location.module
    if module and (module == dotted or module.startswith(dotted + ".")):
        return True

    file_parts: tuple[str, ...] = PurePath(location.file).parts[:-1]
    for candidate in (parts, [part.replace("-", "_") for part in parts]):
        width: int = len(candidate)
        for start in range(len(file_parts) - width + 1):
            if list(file_parts[start : start + width]) == candidate:
                return True
    return False


def is_called_from_outside(
    package: str,
    callee: CallerLocation | None,
    caller: CallerLocation | None,
    test_dirs: Collection[str] = DEFAULT_TEST_DIRS,
) -> bool:
    """Return True if a notice raised at ``callee`` should reach the user.

    Rules, in order:

    1. Unknown frames (top of stack) are treated as external.
    2. A caller inside a test directory is always external.
    3. A callee outside the declaring package was not raised by that package at
       all; it is suppressed.
    4. A caller inside the declaring package is an internal call; suppressed.
    5. Anything else is external.
    """
    if callee is None or caller is None:
        return True
    if is_test_location(caller, test_dirs):
        return True
    if not is_inside_package(callee, package):
        logger.trace("%s: callee %s is not inside the package; suppressed", package, callee)
        return False
    if is_inside_package(caller, package):
        logger.trace("%s: internal call from %s; suppressed", package, caller)
        return False
    return True
