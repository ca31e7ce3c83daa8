"""git-branchstat: Print a one-line summary of a git working directory."""

from ._version import version as _version
from .format import (
    REPORT_FORMATS_TYPE,
    format_report,
)
from .git_branchstat import (
    BranchSignals,
    ExecutionError,
    branchstat,
    collect_signals,
    is_git_repo,
)

__version__ = _version
__all__: list[str] = [
    "REPORT_FORMATS_TYPE",
    "BranchSignals",
    "ExecutionError",
    "branchstat",
    "collect_signals",
    "format_report",
    "is_git_repo",
]
