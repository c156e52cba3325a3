"""External fuzzy picker (``fzf`` by default).

Entries are written to the picker's stdin one per line; the chosen line is
read back from stdout. Cancelling (Esc, Ctrl-C) yields an empty string.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from .config import DEFAULT_PICKER_COMMAND
from .errors import ExternalToolError

logger = logging.getLogger(__name__)


class Picker:
    def __init__(self, command: Sequence[str] = DEFAULT_PICKER_COMMAND) -> None:
        self.command = list(command)

    def __call__(self, entries: Sequence[str]) -> str:
        return self.pick(entries)

    def pick(self, entries: Sequence[str]) -> str:
        logger.debug("offering %d entries to %s", len(entries), self.command[0])
        try:
            proc = subprocess.run(
                self.command,
                input="\n".join(entries),
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise ExternalToolError(self.command[0], str(exc)) from exc
        except KeyboardInterrupt:
            return ""
        # fzf exits 1 for no match and 130 when interrupted; both mean nothing chosen.
        if proc.returncode != 0:
            return ""
        return proc.stdout.strip()
