# topmark:header:start
#
#   project      : Deprecations
#   file         : __main__.py
#   file_relpath : src/deprecations/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m deprecations``."""

from deprecations.cli.main import cli

if __name__ == "__main__":
    cli()
