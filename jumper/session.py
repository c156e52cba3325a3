"""Open or switch to the tmux session for a chosen project."""

from __future__ import annotations

import enum
import logging

from .display import escape_session_target
from .errors import SessionActivationError
from .projects import Project
from .tmux import Tmux

logger = logging.getLogger(__name__)


class Activation(enum.Enum):
    SWITCHED = "switched"
    ATTACHED = "attached"


def activate(project: Project, tmux: Tmux) -> Activation:
    """Ensure a session named after ``project.label`` exists, then enter it.

    The session is created detached in ``project.path`` when missing. Inside
    tmux the current client switches to it; outside, the call attaches and
    blocks until the user detaches.
    """
    name = project.label
    if not tmux.session_exists(name):
        logger.debug("creating session %s in %s", name, project.path)
        if not tmux.create_session(name, project.path):
            raise SessionActivationError("Failed to create new tmux session")

    target = escape_session_target(name)
    if tmux.is_inside():
        if not tmux.switch_client(target):
            raise SessionActivationError("Failed to switch tmux client")
        return Activation.SWITCHED
    if not tmux.attach_session(target):
        raise SessionActivationError("Failed to attach to tmux session")
    return Activation.ATTACHED
