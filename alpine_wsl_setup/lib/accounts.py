from __future__ import annotations

import logging

from .env import PATHS
from .system import System
from .templates import render_subid_line

logger = logging.getLogger(__name__)


def add_user_to_group(system: System, username: str, group: str) -> None:
    # busybox adduser: "adduser USER GROUP" adds an existing user to a group.
    system.run(["adduser", username, group])


def set_password(system: System, username: str) -> None:
    system.run(["passwd", username], interactive=True)


def set_login_shell(system: System, username: str, shell: str) -> None:
    system.run(["chsh", "-s", shell, username])


def append_subids(system: System, username: str, start: int, count: int) -> None:
    """Append one subordinate UID and one GID range for ``username``.

    Not idempotent: every call adds another line to each file.
    """
    line = render_subid_line(username, start, count)
    logger.info("Subordinate ID range for %s: %s", username, line.strip())
    for rel in (PATHS.subuid, PATHS.subgid):
        system.append_file(rel, line)


def append_module(system: System, module: str) -> None:
    system.append_file(PATHS.modules, f"{module}\n")
