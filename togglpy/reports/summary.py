"""Report model and the aggregation of raw Toggl summary payloads into it."""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..errors import MalformedSummary
from ..utils.format_utils import split_duration_ms


@dataclass(frozen=True)
class ProjectReport:
    """One project with its time entry descriptions in API order."""

    project_name: str
    entries: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Report:
    """Total tracked time plus the per-project breakdown."""

    total_hours: int
    total_minutes: int
    projects: Tuple[ProjectReport, ...] = ()


def _title_field(element: Any, field: str, where: str) -> str:
    title = element.get("title") if isinstance(element, dict) else None
    if not isinstance(title, dict) or not isinstance(title.get(field), str):
        raise MalformedSummary(f"{where} has no title.{field}")
    return title[field]


def _parse_total(raw: Dict[str, Any]) -> int:
    # The API sends null for periods without tracked time.
    total = raw.get("total_grand")
    if total is None:
        return 0
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise MalformedSummary(f"total_grand is not a duration in milliseconds: {total!r}")
    return total


def aggregate_summary(raw: Dict[str, Any]) -> Report:
    """Turn a raw summary payload into a Report.

    Either the whole payload is valid and a Report comes back, or
    MalformedSummary is raised; nothing partial is returned.

    Args:
        raw: Summary payload as returned by TogglClient.get_summary

    Returns:
        Report with truncated hours/minutes and projects in response order

    Raises:
        MalformedSummary: If a field needed for the report is missing
    """
    if not isinstance(raw, dict):
        raise MalformedSummary("Summary payload is not an object")
    hours, minutes = split_duration_ms(_parse_total(raw))

    data = raw.get("data")
    if not isinstance(data, list):
        raise MalformedSummary("Summary payload has no data list")

    projects = []
    for p_idx, project in enumerate(data):
        where = f"data[{p_idx}]"
        name = _title_field(project, "project", where)
        items = project.get("items")
        if not isinstance(items, list):
            raise MalformedSummary(f"{where} ({name}) has no items list")
        entries = tuple(
            _title_field(item, "time_entry", f"{where}.items[{i_idx}]")
            for i_idx, item in enumerate(items)
        )
        projects.append(ProjectReport(name, entries))

    return Report(hours, minutes, tuple(projects))
