"""A small embeddable test harness: describe, test and expect."""

from expectkit.assertions import AssertionFailure, Expectation, expect
from expectkit.equality import canonical, equal
from expectkit.runner import Outcome, OutcomeStatus, describe, run_test, test
from expectkit.session import Session
from expectkit.values import ValueKind, undefined

__all__ = [
    "AssertionFailure",
    "Expectation",
    "Outcome",
    "OutcomeStatus",
    "Session",
    "ValueKind",
    "canonical",
    "describe",
    "equal",
    "expect",
    "run_test",
    "test",
    "undefined",
]
