# topmark:header:start
#
#   project      : Deprecations
#   file         : test_expectations.py
#   file_relpath : tests/testing/test_expectations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`DeprecationExpectations` and the pytest fixtures built on it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import deprecations
from deprecations.registry.default import get_registry
from deprecations.testing import DeprecationExpectations

if TYPE_CHECKING:
    from deprecations.registry.registry import DeprecationRegistry

LINK = "https://github.com/acme/orm/issues/1234"


def test_expected_deprecation_passes(deprecation_registry: DeprecationRegistry) -> None:
    """A triggered expectation verifies."""
    expectations = DeprecationExpectations(deprecation_registry)
    expectations.expect_deprecation_with_identifier(LINK)

    deprecations.trigger("acme/orm", LINK, "old api")

    expectations.verify()


def test_expected_deprecation_fails_when_missing(
    deprecation_registry: DeprecationRegistry,
) -> None:
    """An expectation that was not triggered raises `AssertionError`."""
    expectations = DeprecationExpectations(deprecation_registry)
    expectations.expect_deprecation_with_identifier(LINK)

    with pytest.raises(AssertionError, match="was not triggered by code executed in test"):
        expectations.verify()


def test_expectation_ignores_earlier_occurrences(
    deprecation_registry: DeprecationRegistry,
) -> None:
    """Only occurrences after the expectation count."""
    deprecations.trigger("acme/orm", LINK, "old api")
    expectations = DeprecationExpectations(deprecation_registry)
    expectations.expect_deprecation_with_identifier(LINK)

    with pytest.raises(AssertionError):
        expectations.verify()


def test_expected_absence(deprecation_registry: DeprecationRegistry) -> None:
    """`expect_no_deprecation_with_identifier` fails once the link is triggered."""
    expectations = DeprecationExpectations(deprecation_registry)
    expectations.expect_no_deprecation_with_identifier(LINK)
    expectations.verify()

    expectations.expect_no_deprecation_with_identifier(LINK)
    deprecations.trigger("acme/orm", LINK, "old api")
    with pytest.raises(AssertionError, match="but expected not to"):
        expectations.verify()


def test_verify_forgets_expectations(deprecation_registry: DeprecationRegistry) -> None:
    """A failed verification does not fail again."""
    expectations = DeprecationExpectations(deprecation_registry)
    expectations.expect_deprecation_with_identifier(LINK)
    with pytest.raises(AssertionError):
        expectations.verify()

    expectations.verify()
    assert expectations.expected == {}


def test_deduplicated_occurrences_still_count(deprecation_registry: DeprecationRegistry) -> None:
    """Counting continues after the first delivery, so expectations see repeats."""
    deprecations.trigger("acme/orm", LINK, "old api")
    expectations = DeprecationExpectations(deprecation_registry)
    expectations.expect_deprecation_with_identifier(LINK)

    deprecations.trigger("acme/orm", LINK, "old api")

    expectations.verify()


def test_defaults_to_process_registry(deprecation_registry: DeprecationRegistry) -> None:
    """Without an explicit registry, the current default is observed."""
    expectations = DeprecationExpectations()
    assert expectations.registry is get_registry() is deprecation_registry


def test_expect_deprecations_fixture(expect_deprecations: DeprecationExpectations) -> None:
    """The fixture verifies its expectations at teardown."""
    expect_deprecations.expect_deprecation_with_identifier(LINK)
    expect_deprecations.expect_no_deprecation_with_identifier("https://example.com/other")

    deprecations.trigger("acme/orm", LINK, "old api")


def test_deprecation_registry_fixture_tracks(deprecation_registry: DeprecationRegistry) -> None:
    """The fixture installs a tracking registry as the default."""
    assert get_registry() is deprecation_registry
    deprecations.trigger("acme/orm", LINK, "old api")
    assert deprecation_registry.get_triggered_deprecations() == {LINK: 1}
