# topmark:header:start
#
#   project      : Deprecations
#   file         : __init__.py
#   file_relpath : src/deprecations/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core building blocks of the deprecation registry (no global state)."""
