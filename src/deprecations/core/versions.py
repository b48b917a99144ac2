# topmark:header:start
#
#   project      : Deprecations
#   file         : versions.py
#   file_relpath : src/deprecations/core/versions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version ordering for versioned package ignores.

Versions are compared as PEP 440 versions with `packaging.version.Version`, so
equivalent spellings such as ``1.0`` and ``1.0.0`` or ``1.0-rc.1`` and
``1.0rc1`` compare equal.

Deprecation ``since`` values come from arbitrary packages, so a string that is
not a valid PEP 440 version does not raise. If either side is invalid, both are
compared with a permissive fallback that splits them into numeric and
alphabetic runs. Numbers compare numerically. Labels rank as
``dev < a/alpha < b/beta < c/rc < (release) < post/pl``, unknown labels rank
lowest, and missing trailing positions count as ``0``.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Final

from packaging.version import InvalidVersion, Version

_TOKEN_RE: re.Pattern[str] = re.compile(r"\d+|[A-Za-z]+")

# Rank of a plain release position (a number, or nothing at all).
_RELEASE_RANK: Final[int] = 10

_LABEL_RANKS: Final[dict[str, int]] = {
    "dev": 1,
    "a": 2,
    "alpha": 2,
    "b": 3,
    "beta": 3,
    "c": 4,
    "rc": 4,
    "pre": 4,
    "preview": 4,
    "post": 11,
    "pl": 11,
    "p": 11,
    "rev": 11,
    "r": 11,
}

Token = tuple[int, int]


def fallback_key(version: str) -> list[Token]:
    """Return the permissive comparison key used for non-PEP 440 strings.

    Each token becomes ``(rank, number)``: numbers rank as releases, labels by
    `_LABEL_RANKS`.

    Args:
        version (str): A version string such as ``"1.2-snapshot"`` or ``"nightly"``.

    Returns:
        list[Token]: The comparison key.
    """
    key: list[Token] = []
    for token in _TOKEN_RE.findall(version.lower()):
        if token.isdigit():
            key.append((_RELEASE_RANK, int(token)))
        elif token == "v" and not key:
            # Leading "v" prefix as in "v1.2".
            continue
        else:
            key.append((_LABEL_RANKS.get(token, 0), 0))
    return key


def _compare_fallback(left: str, right: str) -> int:
    for a, b in zip_longest(fallback_key(left), fallback_key(right), fillvalue=(_RELEASE_RANK, 0)):
        if a != b:
            return -1 if a < b else 1
    return 0


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings.

    Returns:
        int: ``-1`` if ``left < right``, ``0`` if equal, ``1`` if ``left > right``.
    """
    try:
        left_version: Version = Version(left)
        right_version: Version = Version(right)
    except InvalidVersion:
        return _compare_fallback(left, right)
    if left_version == right_version:
        return 0
    return -1 if left_version < right_version else 1
