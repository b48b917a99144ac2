# topmark:header:start
#
#   project      : Deprecations
#   file         : __init__.py
#   file_relpath : src/deprecations/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line tool for inspecting deprecations configuration."""
