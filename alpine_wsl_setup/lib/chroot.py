from __future__ import annotations

import os
from typing import List, Sequence

# Directories searched for commands inside a target root (Alpine's default PATH).
TARGET_PATH = ("/usr/local/sbin", "/usr/local/bin", "/usr/sbin", "/usr/bin", "/sbin", "/bin")


def is_host_root(root: str) -> bool:
    return os.path.realpath(root) == "/"


def chroot_argv(target_root: str, argv: Sequence[str]) -> List[str]:
    """Argv that runs ``argv`` inside target root."""

    return ["chroot", target_root, *argv]
