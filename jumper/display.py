"""Short display labels for project paths.

Labels are what the picker shows, what history stores, and what tmux session
names are derived from. The transform is lossy: two different paths can map
to the same label, so labels are never used to locate directories.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import Settings


@dataclass(frozen=True)
class DisplayFormatter:
    home: str
    alternate_root: str | None = None
    alternate_alias: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> DisplayFormatter:
        return cls(
            home=str(settings.home).rstrip("/"),
            alternate_root=settings.alternate_root,
            alternate_alias=settings.alternate_alias,
        )

    def label(self, path: str) -> str:
        """Return ``path`` with ``~``/alias prefixes and all dots removed."""
        text = path
        if self.home and _has_prefix(text, self.home):
            text = "~" + text[len(self.home):]
        if self.alternate_root and _has_prefix(text, self.alternate_root):
            text = self.alternate_alias + text[len(self.alternate_root):]
        return text.replace(".", "")


def _has_prefix(path: str, root: str) -> bool:
    """Return whether ``root`` is ``path`` or one of its parent directories."""
    return path == root or path.startswith(root + "/")


def escape_session_target(name: str) -> str:
    """Escape ``~`` so tmux does not treat it specially in ``-t`` targets."""
    return name.replace("~", "\\~")
