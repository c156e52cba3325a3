"""Thin wrapper over the ``tmux`` commands jumper needs.

Every call waits for tmux to finish. A tmux binary that cannot be launched
raises ``ExternalToolError``; a tmux command that runs and fails is reported
through the return value instead.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping
from pathlib import Path

from .errors import ExternalToolError

logger = logging.getLogger(__name__)

TMUX_ENV_VAR = "TMUX"


class Tmux:
    def __init__(self, binary: str = "tmux", environ: Mapping[str, str] | None = None) -> None:
        self.binary = binary
        self.environ = dict(os.environ if environ is None else environ)

    def _run(
        self,
        args: list[str],
        *,
        capture: bool = False,
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> subprocess.CompletedProcess[str]:
        cmd = [self.binary, *args]
        logger.debug("running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                stdout=subprocess.PIPE if capture else None,
                stderr=subprocess.DEVNULL if capture else None,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                cwd=cwd,
                env=dict(self.environ if env is None else env),
            )
        except OSError as exc:
            raise ExternalToolError(self.binary, str(exc)) from exc

    def is_inside(self) -> bool:
        return TMUX_ENV_VAR in self.environ

    def list_sessions(self) -> list[str]:
        """Return live session names; no server running means no sessions."""
        proc = self._run(["list-sessions", "-F", "#{session_name}"], capture=True)
        if proc.returncode != 0:
            return []
        return [line for line in proc.stdout.splitlines() if line]

    def session_exists(self, name: str) -> bool:
        return name in self.list_sessions()

    def create_session(self, name: str, directory: str) -> bool:
        """Create a detached session named ``name`` starting in ``directory``."""
        if not Path(directory).is_dir():
            logger.debug("cannot create session %s: %s is not a directory", name, directory)
            return False
        proc = self._run(["new-session", "-d", "-s", name, "-c", directory], cwd=directory)
        return proc.returncode == 0

    def switch_client(self, target: str) -> bool:
        return self._run(["switch-client", "-t", target]).returncode == 0

    def attach_session(self, target: str) -> bool:
        """Attach in the foreground as a fresh outer client.

        ``TMUX`` is removed from the child environment so tmux does not refuse
        to nest.
        """
        env = {key: value for key, value in self.environ.items() if key != TMUX_ENV_VAR}
        return self._run(["attach-session", "-t", target], env=env).returncode == 0

    def current_session(self) -> str | None:
        """Return the session this process runs in, or ``None`` outside tmux."""
        if not self.is_inside():
            return None
        proc = self._run(["display-message", "-p", "#S"], capture=True)
        if proc.returncode != 0:
            logger.warning("Failed to get current tmux session name")
            return None
        return proc.stdout.strip() or None
