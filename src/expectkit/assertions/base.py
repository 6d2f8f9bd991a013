"""Base data structures for the assertion system."""

from __future__ import annotations

from typing import Any

from expectkit.encoding import render


class AssertionFailure(AssertionError):
    """Raised when an expectation's comparison fails.

    Attributes:
        got_result: The value handed to ``expect``.
        expected_result: The value it was compared against.

    ``str()`` of the failure is the detail block shown in a FAILED report,
    ``Got:<encoded got>`` and ``Expected:<encoded expected>`` on two lines.
    """

    def __init__(self, got_result: Any, expected_result: Any):
        self.got_result = got_result
        self.expected_result = expected_result
        super().__init__(
            f"Got:{render(got_result)}\nExpected:{render(expected_result)}"
        )
