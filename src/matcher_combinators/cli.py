"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from matcher_combinators.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from matcher_combinators.expectation_files import (
    ExpectationFileError,
    load_actual,
    load_expectation,
)
from matcher_combinators.matching_engine import evaluate
from matcher_combinators.results_writing import render_diff
from matcher_combinators.run_execution import RunExecutionError, RunRequest, execute_check_run


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="matcher-combinators")
@click.option("--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Match actual values against expectation files and report differences."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML check suite template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML check suite with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--expected",
    "expected_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the expectation YAML file",
)
@click.option(
    "--actual",
    "actual_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the actual value YAML/JSON file",
)
@click.pass_context
def check(ctx: click.Context, expected_path: str, actual_path: str) -> None:
    """Match one actual value against one expectation and print the difference tree."""
    try:
        expected = load_expectation(expected_path)
        actual = load_actual(actual_path)
    except (ExpectationFileError, OSError) as exc:
        raise CliError(str(exc)) from exc

    outcome = evaluate(expected, actual)
    if outcome.passed:
        click.echo("OK")
        return
    click.echo(render_diff(outcome.diff))
    ctx.exit(1)


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON check suite file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for storing the results workbook",
)
@click.pass_context
def run_checks(ctx: click.Context, config_path: str, output_dir: str | None) -> None:
    """Execute every enabled case of a check suite."""
    try:
        outcome = execute_check_run(RunRequest(config_path=config_path, output_dir=output_dir))
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    for result in outcome.case_results:
        click.echo(f"{result.case_id}: {result.status.value}")
        if result.diff is not None and not result.diff.is_ok:
            click.echo(render_diff(result.diff))
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    if not outcome.passed:
        ctx.exit(1)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
