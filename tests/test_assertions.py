"""Tests for the expectation API."""

import pytest

from expectkit.assertions import AssertionFailure, Expectation, expect
from expectkit.values import undefined


# --- to_equal ---


def test_to_equal_pass_returns_none():
    assert expect(2 + 2).to_equal(4) is None


def test_to_equal_fail_raises_with_both_values():
    with pytest.raises(AssertionFailure) as exc_info:
        expect(2 + 2).to_equal(5)
    failure = exc_info.value
    assert failure.got_result == 4
    assert failure.expected_result == 5
    assert str(failure) == "Got:4\nExpected:5"


def test_to_equal_is_structural():
    expect({"a": [1, 2], "b": None}).to_equal({"b": None, "a": [1, 2]})
    with pytest.raises(AssertionFailure):
        expect([1, 2]).to_equal([2, 1])


def test_failure_message_uses_literal_encoding():
    with pytest.raises(AssertionFailure) as exc_info:
        expect({"a": "x"}).to_equal([1.5, None])
    assert str(exc_info.value) == 'Got:{"a":"x"}\nExpected:[1.5,null]'


def test_failure_is_an_assertion_error():
    with pytest.raises(AssertionError):
        expect(1).to_equal(2)


# --- to_be_null ---


def test_to_be_null_pass():
    expect(None).to_be_null()


def test_to_be_null_rejects_undefined():
    with pytest.raises(AssertionFailure) as exc_info:
        expect(undefined).to_be_null()
    assert str(exc_info.value) == "Got:undefined\nExpected:null"


def test_to_be_null_rejects_falsy_values():
    for value in (0, "", [], {}, False):
        with pytest.raises(AssertionFailure):
            expect(value).to_be_null()


# --- to_be_undefined ---


def test_to_be_undefined_pass():
    expect(undefined).to_be_undefined()


def test_to_be_undefined_rejects_none():
    with pytest.raises(AssertionFailure) as exc_info:
        expect(None).to_be_undefined()
    assert exc_info.value.expected_result is undefined
    assert str(exc_info.value) == "Got:null\nExpected:undefined"


# --- camelCase aliases ---


def test_camel_case_aliases():
    e = expect([1])
    assert isinstance(e, Expectation)
    e.toEqual([1])
    expect(None).toBeNull()
    expect(undefined).toBeUndefined()
    with pytest.raises(AssertionFailure):
        expect(1).toEqual("1")


def test_comparison_errors_are_not_assertion_failures():
    cyclic = []
    cyclic.append(cyclic)
    with pytest.raises(ValueError):
        expect(cyclic).to_equal([])
