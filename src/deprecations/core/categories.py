# topmark:header:start
#
#   project      : Deprecations
#   file         : categories.py
#   file_relpath : src/deprecations/core/categories.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Warning categories emitted by the warning backend.

Each category subclasses the matching builtin so the usual ``warnings`` filters
(``-W error::DeprecationWarning``, pytest's ``filterwarnings``) keep working, while
still allowing callers to target notices from this library specifically.
"""

from __future__ import annotations


class PackagePendingDeprecationWarning(PendingDeprecationWarning):
    """A deprecation announced ahead of time; hidden by default filters."""


class PackageDeprecationWarning(DeprecationWarning):
    """A deprecation aimed at developers of code calling the deprecated API."""


class PackageFutureWarning(FutureWarning):
    """A deprecation aimed at end users; shown by default filters."""
