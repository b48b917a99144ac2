# topmark:header:start
#
#   project      : Deprecations
#   file         : expectations.py
#   file_relpath : src/deprecations/testing/expectations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Expectations on deprecations triggered by the code under test.

An expectation snapshots the current count of a link; `verify` compares it with
the count at the end of the test. Only the occurrence counters are consulted, so
expectations work whichever backends are enabled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deprecations.registry.default import get_registry

if TYPE_CHECKING:
    from deprecations.registry.registry import DeprecationRegistry


class DeprecationExpectations:
    """Collect and verify deprecation expectations for one test.

    Args:
        registry: Registry to observe; defaults to the process default registry
            at the time each expectation is made.
    """

    def __init__(self, registry: DeprecationRegistry | None = None) -> None:
        self._registry: DeprecationRegistry | None = registry
        self.expected: dict[str, int] = {}
        self.not_expected: dict[str, int] = {}

    @property
    def registry(self) -> DeprecationRegistry:
        """Return the observed registry."""
        return self._registry if self._registry is not None else get_registry()

    def _count(self, identifier: str) -> int:
        return self.registry.get_triggered_deprecations().get(identifier, 0)

    def expect_deprecation_with_identifier(self, identifier: str) -> None:
        """Expect ``identifier`` to be triggered before `verify` is called."""
        self.expected[identifier] = self._count(identifier)

    def expect_no_deprecation_with_identifier(self, identifier: str) -> None:
        """Expect ``identifier`` not to be triggered before `verify` is called."""
        self.not_expected[identifier] = self._count(identifier)

    def verify(self) -> None:
        """Check every expectation, then forget them.

        Raises:
            AssertionError: On the first expectation that does not hold.
        """
        expected, self.expected = self.expected, {}
        not_expected, self.not_expected = self.not_expected, {}

        for identifier, before in expected.items():
            if self._count(identifier) <= before:
                raise AssertionError(
                    f"Expected deprecation with identifier '{identifier}' was not "
                    "triggered by code executed in test."
                )
        for identifier, before in not_expected.items():
            if self._count(identifier) > before:
                raise AssertionError(
                    f"Expected deprecation with identifier '{identifier}' was triggered "
                    "by code executed in test, but expected not to."
                )
