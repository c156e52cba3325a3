"""Subcommand implementations.

Each command takes a ``CommandContext`` holding settings and the external
collaborators, writes user-facing text to ``ctx.out`` and returns an exit
status. Tests substitute fakes for the picker, walker and tmux.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from . import cache
from .config import Settings
from .display import DisplayFormatter
from .errors import InvalidDepthError, JumperError
from .history import picker_entries, record_selection, reorder_by_history
from .line_store import read_lines, touch, write_lines
from .picker import Picker
from .projects import ListEntry, Project, Walker, parse_list_entry, resolve_projects
from .session import activate
from .tmux import Tmux
from .walk import FindWalker

logger = logging.getLogger(__name__)

DEPTH_PROMPT = "Set depth for {entry}: (Press Enter to remove depth, Ctrl+C to cancel)"


@dataclass
class CommandContext:
    settings: Settings
    tmux: Tmux
    pick: Callable[[Sequence[str]], str]
    walk: Walker
    cwd: Path
    out: TextIO = field(default_factory=lambda: sys.stdout)
    read_input: Callable[[], str] = input
    formatter: DisplayFormatter = field(init=False)

    def __post_init__(self) -> None:
        self.formatter = DisplayFormatter.from_settings(self.settings)

    @classmethod
    def create(cls, settings: Settings, environ: dict[str, str] | None = None) -> CommandContext:
        """Wire the real fzf/tmux/find collaborators for ``settings``."""
        return cls(
            settings=settings,
            tmux=Tmux(settings.tmux_binary, environ),
            pick=Picker(settings.picker_command),
            walk=FindWalker(settings.find_binary),
            cwd=Path.cwd(),
        )

    def echo(self, text: str) -> None:
        print(text, file=self.out)

    @property
    def list_name(self) -> str:
        return self.settings.projects_file.name


def resolve(ctx: CommandContext) -> list[Project]:
    return resolve_projects(
        read_lines(ctx.settings.projects_file),
        ctx.walk,
        ctx.tmux.list_sessions,
        ctx.formatter,
    )


def run_switcher(ctx: CommandContext) -> int:
    """Pick a project and switch to its tmux session.

    History is written before activation, so a failed activation still counts
    as a selection.
    """
    settings = ctx.settings
    touch(settings.history_file)
    history = read_lines(settings.history_file)
    projects = cache.get_or_resolve(
        settings.projects_file,
        settings.cache_file,
        lambda: resolve(ctx),
        ctx.formatter,
    )
    ranked = reorder_by_history(history, projects)
    entries = picker_entries(history, ranked, ctx.tmux.current_session())

    selected = ctx.pick(entries)
    if not selected:
        return 0

    write_lines(settings.history_file, record_selection(history, selected, settings.history_limit))
    logger.debug("recorded %s in %s", selected, settings.history_file)

    project = next((p for p in ranked if p.label == selected), None)
    if project is None:
        raise JumperError(f"No project matches {selected!r}")
    activate(project, ctx.tmux)
    return 0


def add_project(ctx: CommandContext, directory: str | None = None) -> int:
    projects_file = ctx.settings.projects_file
    touch(projects_file)
    if directory is None:
        target = str(ctx.cwd)
    else:
        target = os.path.normpath(ctx.cwd / Path(directory).expanduser())

    lines = read_lines(projects_file)
    if target in lines:
        ctx.echo(f'"{target}" is already in {ctx.list_name}')
        return 0
    lines.append(target)
    write_lines(projects_file, lines)
    ctx.echo(f'Added "{target}" to {ctx.list_name}')
    return 0


def delete_project(ctx: CommandContext) -> int:
    projects_file = ctx.settings.projects_file
    lines = read_lines(projects_file)
    selected = ctx.pick(lines)
    if not selected:
        return 0
    write_lines(projects_file, [line for line in lines if line != selected])
    ctx.echo(f'Deleted "{selected}" from {ctx.list_name}')
    return 0


def list_projects(ctx: CommandContext) -> int:
    for project in resolve(ctx):
        ctx.echo(project.path)
    return 0


def show_status(ctx: CommandContext) -> int:
    for line in read_lines(ctx.settings.projects_file):
        ctx.echo(line)
    return 0


def parse_depth(raw: str) -> int | None:
    """Parse user depth input; empty means no depth."""
    text = raw.strip()
    if not text:
        return None
    if not text.isascii() or not text.isdigit():
        raise InvalidDepthError(text)
    return int(text)


def set_depth(ctx: CommandContext) -> int:
    """Pick a list entry and set or clear its ``--depth`` suffix.

    Entries are matched by their path part, so an existing depth is replaced
    rather than stacked, and a plain entry is not left behind as a duplicate.
    The list is rewritten sorted.
    """
    projects_file = ctx.settings.projects_file
    lines = read_lines(projects_file)
    selected = ctx.pick(lines)
    if not selected:
        return 0

    path = parse_list_entry(selected).path
    ctx.echo(DEPTH_PROMPT.format(entry=path))
    try:
        raw = ctx.read_input()
    except (EOFError, KeyboardInterrupt):
        return 0
    depth = parse_depth(raw)

    kept = [line for line in lines if parse_list_entry(line).path != path]
    kept.append(ListEntry(path, depth).to_line())
    kept.sort()
    write_lines(projects_file, kept)
    if depth is None:
        ctx.echo(f'Removed depth for "{path}"')
    else:
        ctx.echo(f'Set depth for "{path}" to {depth}')
    return 0


def clear_cache(ctx: CommandContext) -> int:
    if cache.clear_cache(ctx.settings.cache_file):
        ctx.echo("Cache cleared")
    else:
        ctx.echo("No cache file found")
    return 0
