"""Recording context for running a test script end to end."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from expectkit.assertions import expect
from expectkit.runner import (
    Body,
    Outcome,
    OutcomeStatus,
    Sink,
    console_log,
    console_warn,
    describe,
    emit,
    run_test,
)
from expectkit.values import undefined

GROUP_SEPARATOR = " / "


@dataclass
class RecordedOutcome:
    group: str
    outcome: Outcome


def _discard(message: str) -> None:
    pass


@dataclass
class Session:
    """Runs ``describe``/``test`` calls like the module-level functions, but
    keeps every outcome together with the path of enclosing groups.

    Sinks passed to an individual call take precedence over the session's.
    """

    log_sink: Sink = console_log
    failure_sink: Sink = console_warn
    success_sink: Sink = console_log
    show_passed: bool = True
    outcomes: list[RecordedOutcome] = field(default_factory=list)
    _groups: list[str] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.show_passed:
            self.success_sink = _discard

    @property
    def group(self) -> str:
        return GROUP_SEPARATOR.join(self._groups)

    def describe(self, description: str, body: Body, log_sink: Sink | None = None) -> None:
        def grouped() -> None:
            self._groups.append(description)
            try:
                body()
            finally:
                self._groups.pop()

        describe(
            description,
            grouped,
            log_sink if log_sink is not None else self.log_sink,
        )

    def test(
        self,
        test_name: str,
        body: Body,
        failure_sink: Sink | None = None,
        success_sink: Sink | None = None,
    ) -> None:
        outcome = run_test(test_name, body)
        self.outcomes.append(RecordedOutcome(group=self.group, outcome=outcome))
        emit(
            outcome,
            failure_sink if failure_sink is not None else self.failure_sink,
            success_sink if success_sink is not None else self.success_sink,
        )

    test.__test__ = False

    expect = staticmethod(expect)

    def script_globals(self) -> dict[str, Any]:
        """Names injected into a script run through the CLI."""
        return {
            "describe": self.describe,
            "test": self.test,
            "expect": expect,
            "undefined": undefined,
        }

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for r in self.outcomes if r.outcome.status is status)

    @property
    def passed(self) -> int:
        return self._count(OutcomeStatus.PASSED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def errored(self) -> int:
        return self._count(OutcomeStatus.ERRORED)

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.errored == 0

    def summary(self) -> str:
        return f"{self.passed} passed, {self.failed} failed, {self.errored} errored"
