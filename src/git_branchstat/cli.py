"""CLI for git_branchstat."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .format import REPORT_FORMATS_TYPE, format_report
from .git_branchstat import ExecutionError, collect_signals, is_git_repo

logger = logging.getLogger(__name__)

app = typer.Typer()


class ReportFormat(str, Enum):
    """Output formats of the report."""

    line = "line"
    json = "json"
    yaml = "yaml"


def _print_version() -> None:
    print(f"git-branchstat {__version__}")
    raise typer.Exit(0)


def _version_callback(value: bool) -> None:  # noqa: FBT001
    if value:
        _print_version()


def _configure_logging(*, verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[git-branchstat] %(levelname)s %(message)s",
        )


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def git_branchstat(
    action: Annotated[
        str | None,
        typer.Argument(
            help="'version' prints the version, anything else checks this directory",
            show_default=False,
        ),
    ] = None,
    *,
    fmt: Annotated[
        ReportFormat, typer.Option("-f", "--format", help="output format")
    ] = ReportFormat.line,
    color: Annotated[
        bool, typer.Option("-c", "--color", help="colorize the directory name")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="log git invocations")
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Print version",
        ),
    ] = None,
) -> int:
    """Print a one-line summary of the git repo in the current directory."""
    if action == "version":
        _print_version()
    fmt_report: REPORT_FORMATS_TYPE = fmt.value  # type: ignore[assignment]
    _configure_logging(verbose=verbose)

    directory = Path().resolve()
    if not is_git_repo(directory):
        print("Not a git repo.")
        raise typer.Exit(1)
    try:
        signals = collect_signals(directory)
    except ExecutionError:
        # best effort: a prompt should never show an error
        logger.debug("Ignoring error in '%s'", directory, exc_info=True)
        return 0
    report = format_report(directory.name, signals, fmt=fmt_report, color=color)
    if report is not None:
        print(report)
    return 0
