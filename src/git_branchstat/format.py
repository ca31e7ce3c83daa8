"""Format the signals of `git_branchstat`."""

import json
from typing import Literal

import yaml

from .git_branchstat import BranchSignals, format_line

REPORT_FORMATS_TYPE = Literal["line", "json", "yaml"]


def format_report(
    name: str,
    signals: BranchSignals,
    *,
    fmt: REPORT_FORMATS_TYPE,
    color: bool = False,
) -> str | None:
    """Format signals to a readable output, or None if there are none."""
    try:
        formatter = {
            "line": _format_line,
            "json": _format_json,
            "yaml": _format_yaml,
        }[fmt]
    except KeyError as e:
        raise ValueError(f"format_report got an unsupported {fmt=}") from e
    return formatter(name, signals, color=color)


def _present(name: str, signals: BranchSignals) -> dict[str, dict[str, str]]:
    present = {k: v for k, v in signals.items() if v is not None}
    return {name: present} if present else {}


def _format_line(name: str, signals: BranchSignals, *, color: bool) -> str | None:
    return format_line(name, signals, color=color)


def _format_json(
    name: str, signals: BranchSignals, *, color: bool  # noqa: ARG001
) -> str | None:
    report = _present(name, signals)
    if not report:
        return None
    return json.dumps(report, indent=2, ensure_ascii=False)


def _format_yaml(
    name: str, signals: BranchSignals, *, color: bool  # noqa: ARG001
) -> str | None:
    report = _present(name, signals)
    if not report:
        return None
    return yaml.dump(
        report,
        allow_unicode=True,
        default_flow_style=False,
        indent=2,
        sort_keys=False,
    )
