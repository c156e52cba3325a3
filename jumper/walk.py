"""Directory expansion for ``--depth`` project list entries.

Delegates to ``find -L <root> -maxdepth <depth> -type d`` so symlinked
directories are followed. Output is best-effort: a non-zero exit (permission
errors, a vanished root) still yields whatever paths were printed.
"""

from __future__ import annotations

import logging
import subprocess

from .errors import ExternalToolError

logger = logging.getLogger(__name__)


class FindWalker:
    def __init__(self, find_binary: str = "find") -> None:
        self.find_binary = find_binary

    def command(self, root: str, max_depth: int) -> list[str]:
        return [self.find_binary, "-L", root, "-maxdepth", str(max_depth), "-type", "d"]

    def __call__(self, root: str, max_depth: int) -> list[str]:
        cmd = self.command(root, max_depth)
        logger.debug("walking %s to depth %d", root, max_depth)
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise ExternalToolError(self.find_binary, str(exc)) from exc
        if proc.returncode != 0:
            logger.debug("%s exited with %d for %s", self.find_binary, proc.returncode, root)
        return [line for line in proc.stdout.splitlines() if line]
