"""Generate sample output."""

from git_branchstat.format import format_report
from git_branchstat.git_branchstat import BranchSignals

signals = BranchSignals(
    {
        "ahead_behind": "main [ahead 1]",
        "modified": "2±",
        "staged": "Staged 3",
        "untracked": "4?",
    }
)
for fmt in ("line", "json", "yaml"):
    print(format_report("my-repo", signals, fmt=fmt, color=fmt == "line"))
