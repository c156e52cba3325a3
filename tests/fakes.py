"""In-memory stand-ins for the external picker, walker and tmux."""

from __future__ import annotations

import io
from collections.abc import Sequence
from pathlib import Path

from jumper.commands import CommandContext
from jumper.config import Settings


class FakeTmux:
    def __init__(
        self,
        sessions: Sequence[str] = (),
        inside: bool = False,
        current: str | None = None,
        create_ok: bool = True,
        switch_ok: bool = True,
        attach_ok: bool = True,
    ) -> None:
        self.sessions = list(sessions)
        self.inside = inside
        self.current = current
        self.create_ok = create_ok
        self.switch_ok = switch_ok
        self.attach_ok = attach_ok
        self.calls: list[tuple[str, ...]] = []

    def is_inside(self) -> bool:
        return self.inside

    def list_sessions(self) -> list[str]:
        return list(self.sessions)

    def session_exists(self, name: str) -> bool:
        return name in self.sessions

    def create_session(self, name: str, directory: str) -> bool:
        self.calls.append(("create", name, directory))
        if self.create_ok:
            self.sessions.append(name)
        return self.create_ok

    def switch_client(self, target: str) -> bool:
        self.calls.append(("switch", target))
        return self.switch_ok

    def attach_session(self, target: str) -> bool:
        self.calls.append(("attach", target))
        return self.attach_ok

    def current_session(self) -> str | None:
        return self.current if self.inside else None


class FakePicker:
    def __init__(self, choice: str = "") -> None:
        self.choice = choice
        self.offered: list[list[str]] = []

    def __call__(self, entries: Sequence[str]) -> str:
        self.offered.append(list(entries))
        return self.choice


class FakeWalker:
    def __init__(self, tree: dict[str, list[str]] | None = None) -> None:
        self.tree = tree or {}
        self.calls: list[tuple[str, int]] = []

    def __call__(self, root: str, max_depth: int) -> list[str]:
        self.calls.append((root, max_depth))
        return list(self.tree.get(root, []))


def make_settings(root: Path, **overrides) -> Settings:
    home = root / "home"
    home.mkdir(exist_ok=True)
    values = {
        "home": home,
        "projects_file": home / ".projects",
        "history_file": home / ".projects_history",
        "cache_file": root / "tmp" / ".projects_cache",
    }
    values.update(overrides)
    return Settings(**values)


def make_context(root: Path, tmux=None, pick=None, walk=None, read_input=None, **overrides):
    ctx = CommandContext(
        settings=make_settings(root, **overrides),
        tmux=tmux or FakeTmux(),
        pick=pick or FakePicker(),
        walk=walk or FakeWalker(),
        cwd=root,
        out=io.StringIO(),
    )
    if read_input is not None:
        ctx.read_input = read_input
    return ctx
