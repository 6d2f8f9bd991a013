"""Run test bodies, classify their outcomes and report them to sinks."""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable

from expectkit.assertions.base import AssertionFailure

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]
Body = Callable[[], Any]


class OutcomeStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


@dataclass
class Outcome:
    """Result of running one test body.

    Attributes:
        status: PASSED, FAILED (an expectation did not hold) or ERRORED
            (the test code itself raised something else).
        test_name: Name given to ``test``.
        detail: ``Got:/Expected:`` block for failures, ``Type: message``
            for errors, empty for passes.
        duration: Wall-clock seconds spent in the body.
    """

    status: OutcomeStatus
    test_name: str
    detail: str = ""
    duration: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status is OutcomeStatus.PASSED

    def render(self) -> str:
        if self.status is OutcomeStatus.PASSED:
            return f"PASSED\nTest:{self.test_name}"
        if self.status is OutcomeStatus.FAILED:
            return f"FAILED\nTest:{self.test_name}\n{self.detail}"
        return f"ERROR\n{self.test_name}\n{self.detail}"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


def console_log(message: str) -> None:
    print(message)


def console_warn(message: str) -> None:
    print(message, file=sys.stderr)


def _error_text(err: Exception) -> str:
    text = str(err)
    name = type(err).__name__
    return f"{name}: {text}" if text else name


def run_test(test_name: str, body: Body) -> Outcome:
    """Run *body* once and classify how it ended.

    Only ``Exception`` subclasses are captured; KeyboardInterrupt and
    SystemExit still propagate.
    """
    start = time.monotonic()
    try:
        body()
    except AssertionFailure as failure:
        outcome = Outcome(OutcomeStatus.FAILED, test_name, str(failure))
    except Exception as e:
        logger.debug(f"Test '{test_name}' raised {type(e).__name__}", exc_info=True)
        outcome = Outcome(OutcomeStatus.ERRORED, test_name, _error_text(e))
    else:
        outcome = Outcome(OutcomeStatus.PASSED, test_name)
    outcome.duration = time.monotonic() - start

    logger.debug(f"Test '{test_name}' {outcome.status.value} in {outcome.duration:.3f}s")
    return outcome


def emit(outcome: Outcome, failure_sink: Sink, success_sink: Sink) -> None:
    """Send the rendered outcome to exactly one of the two sinks."""
    if outcome.passed:
        success_sink(outcome.render())
    else:
        failure_sink(outcome.render())


def test(
    test_name: str,
    body: Body,
    failure_sink: Sink = console_warn,
    success_sink: Sink = console_log,
) -> None:
    """Run one named test and report its outcome.

    Nothing raised by *body* escapes: a failed expectation is reported as
    FAILED, anything else as ERROR, both through *failure_sink*. A clean
    run is reported as PASSED through *success_sink*.
    """
    emit(run_test(test_name, body), failure_sink, success_sink)


# Keep pytest from collecting the harness entry point when it is imported
# into a test module.
test.__test__ = False


def describe(description: str, body: Body, log_sink: Sink = console_log) -> None:
    """Log *description*, then run *body*, which usually calls ``test``.

    Errors raised directly in *body* are not caught.
    """
    log_sink(description)
    logger.debug(f"Entering group '{description}'")
    body()
