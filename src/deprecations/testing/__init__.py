# topmark:header:start
#
#   project      : Deprecations
#   file         : __init__.py
#   file_relpath : src/deprecations/testing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Test helpers for asserting which deprecations were triggered.

The pytest fixtures live in ``deprecations.testing.pytest_plugin``; enable them
with ``pytest_plugins = ["deprecations.testing.pytest_plugin"]`` in a top-level
``conftest.py``. The plugin imports pytest, which is installed with the
``pytest`` extra (``pip install deprecations[pytest]``).
"""

from __future__ import annotations

from deprecations.testing.expectations import DeprecationExpectations

__all__ = ["DeprecationExpectations"]
