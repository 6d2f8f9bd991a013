from __future__ import annotations

from pathlib import Path

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from expectkit.runner import OutcomeStatus
from expectkit.session import RecordedOutcome


def _first_line(text: str) -> str:
    return text.splitlines()[0] if text else ""


def build_suite(suite_name: str, recorded: list[RecordedOutcome]) -> TestSuite:
    """Build one JUnit suite with a test case per recorded outcome.

    The describe path becomes the case classname; top-level tests use the
    suite name instead.
    """
    suite = TestSuite(suite_name)
    total_time = 0.0

    for entry in recorded:
        outcome = entry.outcome
        case = TestCase(outcome.test_name)
        case.classname = entry.group or suite_name
        case.time = round(outcome.duration, 6)
        total_time += outcome.duration

        if outcome.status is OutcomeStatus.FAILED:
            result = Failure(_first_line(outcome.detail), "AssertionFailure")
            result.text = outcome.render()
            case.result = [result]
        elif outcome.status is OutcomeStatus.ERRORED:
            result = Error(_first_line(outcome.detail))
            result.text = outcome.render()
            case.result = [result]
        suite.add_testcase(case)

    # An empty suite never went through add_testcase, so count explicitly
    suite.update_statistics()
    # Set time after update_statistics, which resets it
    suite.time = round(total_time, 6)
    return suite


def write_junit(path: Path, suite_name: str, recorded: list[RecordedOutcome]) -> Path:
    """Write junit.xml for one run, return its path."""
    xml = JUnitXml()
    # Use append (not +=) to preserve properties and time
    xml.append(build_suite(suite_name, recorded))

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
