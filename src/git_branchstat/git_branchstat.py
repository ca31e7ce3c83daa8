"""Summarize the state of a git working directory in one line.

Four independent git queries run concurrently; each one reduces its output
to a short signal (or nothing), and the signals are joined in a fixed order:

    my-repo              | main [ahead 1], 2±, Staged 3, 4?

Requires GitPython package
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from colorama import Fore
from git import Git
from git.exc import GitCommandNotFound

logger = logging.getLogger(__name__)

LABEL_WIDTH = 20
SEPARATOR = ", "
# `git branch` exits with 128 outside of a repository
NOT_A_REPO_EXIT_CODE = 128

BranchSignals = dict[str, str | None]


class ExecutionError(RuntimeError):
    """A git query could not be run or its output could not be read."""


def _check_directory(directory: Path) -> None:
    # GitPython falls back to the process cwd for a directory it cannot enter
    if not directory.is_dir() or not os.access(directory, os.X_OK):
        raise ExecutionError(f"Cannot run git in '{directory}': not a directory")


def _split_lines(text: str) -> list[str]:
    """Split on newlines only, dropping a trailing carriage return."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def command_output(directory: Path, args: list[str]) -> list[str]:
    """Run git in a directory and return the lines of its output."""
    logger.debug("running git %s in %s", " ".join(args), directory)
    _check_directory(directory)
    try:
        stdout = Git(directory).execute(
            [Git.GIT_PYTHON_GIT_EXECUTABLE, *args],
            with_exceptions=False,
            stdout_as_string=False,
            strip_newline_in_stdout=False,
        )
        return _split_lines(stdout.decode("utf-8"))
    except (GitCommandNotFound, OSError, UnicodeDecodeError) as e:
        raise ExecutionError(
            f"Error while running 'git {' '.join(args)}' in '{directory}'"
        ) from e


def is_git_repo(directory: Path) -> bool:
    """Check if git considers a directory to be a repository."""
    _check_directory(directory)
    try:
        status, _, _ = Git(directory).execute(
            [Git.GIT_PYTHON_GIT_EXECUTABLE, "branch"],
            with_extended_output=True,
            with_exceptions=False,
        )
    except (GitCommandNotFound, OSError) as e:
        raise ExecutionError(f"Error while probing '{directory}'") from e
    return status != NOT_A_REPO_EXIT_CODE


def ahead_behind(path: Path) -> str | None:
    """Return the tracking info of all local branches that have one."""
    lines = command_output(
        path,
        [
            "for-each-ref",
            "--format=%(refname:short) %(upstream:track)",
            "refs/heads",
        ],
    )
    stripped = [line.strip("'").strip() for line in lines]
    # a second token means the branch has tracking info
    response = "".join(line for line in stripped if len(line.split(" ")) > 1)
    return response or None


def modified(path: Path) -> str | None:
    """Return the number of files with unstaged changes."""
    shortstat = "\n".join(command_output(path, ["diff", "--shortstat"]))
    if "changed" not in shortstat:
        return None
    return f"{shortstat.split()[0]}±"


def staged(path: Path) -> str | None:
    """Return the number of lines in the stat of staged changes."""
    lines = command_output(path, ["diff", "--stat", "--cached"])
    if not lines:
        return None
    return f"Staged {len(lines)}"


def untracked(path: Path) -> str | None:
    """Return the number of untracked, non-ignored files."""
    lines = command_output(path, ["ls-files", "--others", "--exclude-standard"])
    if not lines:
        return None
    return f"{len(lines)}?"


def collect_signals(path: Path) -> BranchSignals:
    """Run all signal extractors concurrently, keeping their order."""
    extractors = {
        "ahead_behind": ahead_behind,
        "modified": modified,
        "staged": staged,
        "untracked": untracked,
    }
    with ThreadPoolExecutor(max_workers=len(extractors)) as executor:
        # map() yields in submission order, and re-raises the first failure
        results = list(
            executor.map(lambda extract: extract(path), extractors.values())
        )
    return dict(zip(extractors, results, strict=True))


def format_line(
    name: str, signals: BranchSignals, *, color: bool = False
) -> str | None:
    """Format signals as a labeled status line, or None if there are none."""
    joined = SEPARATOR.join(s for s in signals.values() if s is not None)
    if not joined:
        return None
    label = f"{name:{LABEL_WIDTH}}"
    if color:
        label = Fore.LIGHTRED_EX + label + Fore.RESET
    return f"{label} | {joined}"


def branchstat(path: Path, *, color: bool = False) -> str | None:
    """Return the status line for a repo, or None if there is nothing to report.

    The caller is responsible for checking that `path` is a git repository.
    """
    return format_line(path.name, collect_signals(path), color=color)
