"""On-disk cache of the resolved project list.

The cache file holds one path per line. It is trusted while its mtime is at
least the project list's mtime; any edit to the list makes it stale, and the
next resolution rewrites it wholesale.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .display import DisplayFormatter
from .line_store import read_lines, write_lines
from .projects import Project

logger = logging.getLogger(__name__)


def _mtime_ns(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


def is_cache_fresh(projects_file: Path, cache_file: Path) -> bool:
    """Return whether ``cache_file`` is at least as new as ``projects_file``.

    A missing project list never validates a cache.
    """
    list_mtime = _mtime_ns(projects_file)
    cache_mtime = _mtime_ns(cache_file)
    if list_mtime is None or cache_mtime is None:
        return False
    return cache_mtime >= list_mtime


def get_or_resolve(
    projects_file: Path,
    cache_file: Path,
    resolve: Callable[[], list[Project]],
    formatter: DisplayFormatter,
) -> list[Project]:
    if is_cache_fresh(projects_file, cache_file):
        logger.debug("using cached projects from %s", cache_file)
        return [Project(path, formatter.label(path)) for path in read_lines(cache_file)]

    logger.debug("cache %s is stale or missing; resolving projects", cache_file)
    projects = resolve()
    write_lines(cache_file, [project.path for project in projects])
    return projects


def clear_cache(cache_file: Path) -> bool:
    """Delete ``cache_file``, returning whether there was anything to delete."""
    try:
        cache_file.unlink()
    except FileNotFoundError:
        return False
    return True
