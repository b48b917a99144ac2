# topmark:header:start
#
#   project      : Deprecations
#   file         : frames.py
#   file_relpath : src/deprecations/core/frames.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Caller location lookup.

The registry never walks the interpreter stack itself: it asks a `FrameProvider`
for the location ``depth`` frames above the registry method that is running.
`StackFrameProvider` answers from the live stack; `FixedFrameProvider` answers
from a fixed list so tests can describe arbitrary call chains.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


@dataclass(frozen=True)
class CallerLocation:
    """Source location of one stack frame.

    Attributes:
        file: Path of the source file, as recorded by the interpreter.
        line: Line number currently executing in that frame.
        module: The frame's module ``__name__`` (``None`` if unknown).
    """

    file: str
    line: int
    module: str | None = None

    @property
    def basename(self) -> str:
        """Return the file name without its directories."""
        return os.path.basename(self.file)

    def __str__(self) -> str:
        return f"{self.basename}:{self.line}"


class FrameProvider(Protocol):
    """Source of caller locations for the registry."""

    def locate(self, depth: int) -> CallerLocation | None:
        """Return the location ``depth`` frames above the caller of ``locate``.

        ``depth=1`` is the frame that called the function invoking ``locate``.
        Returns ``None`` when the stack is not that deep.
        """
        ...


class StackFrameProvider:
    """`FrameProvider` backed by the running interpreter stack."""

    def locate(self, depth: int) -> CallerLocation | None:
        """Return the live frame location ``depth`` levels above our caller."""
        frame: FrameType | None = inspect.currentframe()
        try:
            # Skip this method, then the registry method that called us.
            for _ in range(depth + 1):
                if frame is None:
                    return None
                frame = frame.f_back
            if frame is None:
                return None
            return CallerLocation(
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
                module=frame.f_globals.get("__name__"),
            )
        finally:
            # Break the reference cycle between this frame and its locals.
            del frame


class FixedFrameProvider:
    """`FrameProvider` returning a predefined call chain.

    ``locations[0]`` is returned for depth 1 (the producer calling the registry),
    ``locations[1]`` for depth 2 (the producer's caller), and so on.
    """

    def __init__(self, locations: Sequence[CallerLocation]) -> None:
        self.locations: tuple[CallerLocation, ...] = tuple(locations)

    def locate(self, depth: int) -> CallerLocation | None:
        """Return the predefined location for ``depth`` or ``None``."""
        if 1 <= depth <= len(self.locations):
            return self.locations[depth - 1]
        return None
