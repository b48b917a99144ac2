# topmark:header:start
#
#   project      : Deprecations
#   file         : exit_codes.py
#   file_relpath : src/deprecations/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes used by the ``deprecations`` command line tool."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): The command could not run (e.g. a missing file).
        INVALID_CONFIG (int): The configuration was read but holds invalid values.
    """

    SUCCESS = 0
    FAILURE = 1
    INVALID_CONFIG = 2
