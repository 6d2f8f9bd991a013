from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="expectkit", help="Run describe/test/expect scripts")

DEFAULT_DEBUG_LOG = Path(".expectkit") / "debug.log"

EXAMPLE_CONFIG = """\
suite: example
junit: reports/junit.xml
show_passed: true
verbose: false
"""

EXAMPLE_SCRIPT = '''\
"""Example checks. Run with: expectkit run example.py"""


def arithmetic():
    test("adds", lambda: expect(2 + 2).toEqual(4))
    test("nothing is null", lambda: expect(None).toBeNull())


def structures():
    test("key order does not matter", lambda: expect({"a": 1, "b": 2}).toEqual({"b": 2, "a": 1}))
    test("element order matters", lambda: expect([1, 2]).to_equal([1, 2]))


describe("arithmetic", arithmetic)
describe("structures", structures)
'''


def _echo_err(message: str) -> None:
    typer.echo(message, err=True)


@app.command()
def run(
    script: str = typer.Argument(help="Path to a script calling describe/test/expect"),
    config: str | None = typer.Option(
        None, help="Path to expectkit.yaml (defaults to the one next to the script)"
    ),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report to this path"),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Write the debug log to this file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run a test script and report its outcomes."""
    import runpy

    import yaml

    from expectkit.config import RunConfig, find_config, load_config
    from expectkit.reporting.junit import write_junit
    from expectkit.session import Session
    from expectkit.verbose import close_logger, setup_logger

    script_path = Path(script)
    if not script_path.is_file():
        typer.echo(f"Error: script not found: {script}", err=True)
        raise typer.Exit(1)

    config_path = Path(config) if config else find_config(script_path)
    try:
        run_config = load_config(config_path) if config_path else RunConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config {config_path}: {e}", err=True)
        raise typer.Exit(1)

    verbose = verbose or run_config.verbose
    logger = None
    if verbose or debug_log:
        logger = setup_logger(
            Path(debug_log) if debug_log else DEFAULT_DEBUG_LOG, verbose=verbose
        )
        logger.debug(f"Running script {script_path}")

    session = Session(
        log_sink=typer.echo,
        failure_sink=_echo_err,
        success_sink=typer.echo,
        show_passed=run_config.show_passed,
    )

    script_failed = False
    try:
        runpy.run_path(
            str(script_path), init_globals=session.script_globals(), run_name="__main__"
        )
    except Exception as e:
        # describe() does not catch, so setup errors end the script here
        script_failed = True
        typer.echo(f"Error: {type(e).__name__}: {e}", err=True)
        if logger is not None:
            logger.debug("Script raised outside of a test", exc_info=True)
    finally:
        if logger is not None:
            logger.debug(f"Finished: {session.summary()}")
            close_logger(logger)

    typer.echo(session.summary())

    report = junit or run_config.junit
    if report:
        report_path = write_junit(Path(report), run_config.suite, session.outcomes)
        typer.echo(f"Report: {report_path}")

    if script_failed or not session.ok:
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write the example into"),
):
    """Write an example expectkit.yaml and test script."""
    from expectkit.config import CONFIG_FILENAME

    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, content in ((CONFIG_FILENAME, EXAMPLE_CONFIG), ("example.py", EXAMPLE_SCRIPT)):
        target = project_dir / name
        if target.exists():
            typer.echo(f"{name} already exists in {dir}, skipping.")
            continue
        target.write_text(content)
        written.append(name)

    if written:
        typer.echo(f"Initialized expectkit project in {dir}:")
        for name in written:
            typer.echo(f"  {name}")


@app.command()
def schema(
    out: str | None = typer.Option(
        None, help="Output path for the JSON Schema (prints to stdout when omitted)"
    ),
):
    """Generate the JSON Schema of expectkit.yaml."""
    from expectkit.schema import generate_json_schema, write_json_schema

    if out is None:
        import json

        typer.echo(json.dumps(generate_json_schema(), indent=2))
        return

    write_json_schema(Path(out))
    typer.echo(f"Wrote schema: {out}")


def main() -> None:
    app()
