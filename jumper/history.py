"""Recency ranking of project candidates.

History is a list of display labels, most recent first. Candidates are
matched to history by label, never by path.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .config import DEFAULT_HISTORY_LIMIT
from .projects import Project


def reorder_by_history(history: Sequence[str], candidates: Sequence[Project]) -> list[Project]:
    """Move history hits to the front in history order.

    Candidates never mentioned in history follow in their original order.
    When two candidates share a label, the later one wins the history slot and
    the earlier one keeps its original position.
    """
    by_label = {project.label: project for project in candidates}
    seen: set[str] = set()
    ordered: list[Project] = []
    for label in history:
        project = by_label.get(label)
        if project is None or project.path in seen:
            continue
        seen.add(project.path)
        ordered.append(project)
    for project in candidates:
        if project.path in seen:
            continue
        seen.add(project.path)
        ordered.append(project)
    return ordered


def picker_entries(
    history: Sequence[str],
    candidates: Sequence[Project],
    current_label: str | None = None,
) -> list[str]:
    """Return the labels to offer in the picker, most relevant first.

    ``current_label`` is the active tmux session; it is never offered.
    """
    remaining = [project for project in candidates if project.label != current_label]
    available = {project.label for project in remaining}
    entries: list[str] = []
    listed: set[str] = set()
    for label in history:
        if label in available and label not in listed:
            listed.add(label)
            entries.append(label)
    for project in reorder_by_history(history, remaining):
        if project.label not in listed:
            listed.add(project.label)
            entries.append(project.label)
    return entries


def record_selection(
    history: Iterable[str],
    selected: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> list[str]:
    updated = [selected]
    seen = {selected}
    for label in history:
        if len(updated) >= limit:
            break
        if label in seen:
            continue
        seen.add(label)
        updated.append(label)
    return updated[:limit]
