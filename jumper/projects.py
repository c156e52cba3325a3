"""Project model and candidate aggregation.

Candidates come from the project list (with ``--depth`` entries expanded
through a directory walker) followed by live tmux session names. The result
is deduplicated by path, keeping the first occurrence.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .display import DisplayFormatter

DEPTH_ENTRY_RE = re.compile(r"(?P<path>.*) --depth (?P<depth>[0-9]+)")

Walker = Callable[[str, int], list[str]]
SessionLister = Callable[[], list[str]]


@dataclass(frozen=True)
class Project:
    path: str
    label: str


@dataclass(frozen=True)
class ListEntry:
    """One parsed line of the project list."""

    path: str
    depth: int | None = None

    def to_line(self) -> str:
        if self.depth is None:
            return self.path
        return f"{self.path} --depth {self.depth}"


def parse_list_entry(line: str) -> ListEntry:
    """Parse ``line``; anything not matching ``<path> --depth <digits>`` is a plain path."""
    match = DEPTH_ENTRY_RE.fullmatch(line)
    if match is None or not match.group("path"):
        return ListEntry(line)
    return ListEntry(match.group("path"), int(match.group("depth")))


def dedupe_projects(projects: Iterable[Project]) -> list[Project]:
    seen: set[str] = set()
    unique: list[Project] = []
    for project in projects:
        if project.path in seen:
            continue
        seen.add(project.path)
        unique.append(project)
    return unique


def resolve_projects(
    list_lines: Iterable[str],
    walk: Walker,
    list_sessions: SessionLister,
    formatter: DisplayFormatter,
) -> list[Project]:
    """Build the ordered, unique candidate list.

    Depth entries contribute their root followed by every walked directory;
    other non-blank lines contribute themselves. Live session names are
    appended last, so a session named like a listed path never displaces it.
    """
    paths: list[str] = []
    for line in list_lines:
        if not line.strip():
            continue
        entry = parse_list_entry(line)
        paths.append(entry.path)
        if entry.depth is not None:
            paths.extend(walk(entry.path, entry.depth))
    paths.extend(list_sessions())
    return dedupe_projects(Project(path, formatter.label(path)) for path in paths)
