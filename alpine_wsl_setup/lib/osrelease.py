"""OS identification from /etc/os-release."""

from __future__ import annotations

from typing import Optional

from .env import PATHS
from .system import System


def os_release_id(system: System) -> Optional[str]:
    """Return the lower-cased ``ID=`` value, or None if it cannot be read."""
    try:
        content = system.read_file(PATHS.os_release)
    except FileNotFoundError:
        return None

    for line in content.splitlines():
        if line.startswith("ID="):
            return line.split("=", 1)[1].strip().strip('"').strip("'").lower()
    return None


def is_alpine(system: System) -> bool:
    return os_release_id(system) == "alpine"
