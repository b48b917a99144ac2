# topmark:header:start
#
#   project      : Deprecations
#   file         : consumer.py
#   file_relpath : tests/fixtures/consumer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Downstream code using the acme_foo package."""

from __future__ import annotations

from acme_foo.bar import Bar


def trigger_dependency_with_deprecation() -> None:
    Bar().old_func()


def trigger_dependency_with_deprecation_from_inside() -> None:
    Bar().new_func()
