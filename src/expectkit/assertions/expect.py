"""Expectations: wrap a value and compare it against a target."""

from __future__ import annotations

import logging
from typing import Any

from expectkit.assertions.base import AssertionFailure
from expectkit.equality import equal
from expectkit.values import undefined

logger = logging.getLogger(__name__)


class Expectation:
    """Comparison operations on a value under test.

    Every check returns None when it holds and raises AssertionFailure when
    it does not; there is no boolean result to inspect.
    """

    def __init__(self, got: Any):
        self.got = got

    def _check(self, expected: Any) -> None:
        if equal(self.got, expected):
            return
        logger.debug(f"Expectation failed: got={self.got!r} expected={expected!r}")
        raise AssertionFailure(self.got, expected)

    def to_equal(self, expected: Any) -> None:
        self._check(expected)

    def to_be_null(self) -> None:
        self._check(None)

    def to_be_undefined(self) -> None:
        self._check(undefined)

    # camelCase names kept for drop-in use of existing test scripts
    toEqual = to_equal
    toBeNull = to_be_null
    toBeUndefined = to_be_undefined


def expect(got: Any) -> Expectation:
    """Start an expectation on *got*."""
    return Expectation(got)
