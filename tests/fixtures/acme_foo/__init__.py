# topmark:header:start
#
#   project      : Deprecations
#   file         : __init__.py
#   file_relpath : tests/fixtures/acme_foo/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stand-in third-party package declaring its own deprecations."""
