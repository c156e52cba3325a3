"""Exception types raised by jumper commands.

``cli.main`` turns any ``JumperError`` into a non-zero exit with its message.
"""

from __future__ import annotations


class JumperError(Exception):
    pass


class ExternalToolError(JumperError):
    """An external program (picker, tmux, find) could not be launched."""

    def __init__(self, tool: str, reason: str) -> None:
        super().__init__(f"Failed to execute {tool}: {reason}")
        self.tool = tool
        self.reason = reason


class SessionActivationError(JumperError):
    pass


class InvalidDepthError(JumperError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid depth {raw!r}: expected a non-negative integer")
        self.raw = raw
