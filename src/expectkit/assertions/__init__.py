"""Assertion system for checking values in tests."""

from expectkit.assertions.base import AssertionFailure
from expectkit.assertions.expect import Expectation, expect

__all__ = ["AssertionFailure", "Expectation", "expect"]
