from __future__ import annotations

import logging
import re
from typing import List, Sequence

from .env import PATHS
from .system import System

logger = logging.getLogger(__name__)

# apk "pkgver": <name>-<version>-r<release>, version always starts with a digit.
_PKGVER_RE = re.compile(r"^(?P<name>.+?)-(?P<version>\d[^-]*)-r(?P<release>\d+)$")
_RELEASE_RE = re.compile(r"v\d+\.\d+")


def split_pkgver(pkgver: str) -> str:
    """Return the package name of an apk pkgver, or the input if it has no version."""
    m = _PKGVER_RE.match(pkgver)
    return m.group("name") if m else pkgver


def apk_update(system: System) -> None:
    system.run(["apk", "update"])


def apk_upgrade(system: System) -> None:
    system.run(["apk", "upgrade"])


def apk_add(system: System, packages: Sequence[str], *, update_index: bool = False) -> None:
    if not packages:
        return
    argv = ["apk", "add"]
    if update_index:
        argv.append("-U")
    system.run([*argv, *packages])


def apk_has_package(system: System, package: str) -> bool:
    """Return True if the repositories know about a package name."""
    r = system.run(["apk", "info", package], check=False, readonly=True)
    return r.returncode == 0


def apk_list_installed(system: System) -> List[str]:
    """Names of installed packages, in apk's listing order."""
    r = system.run(["apk", "list", "-I"], readonly=True)
    names: List[str] = []
    for line in r.stdout.splitlines():
        line = line.strip()
        if not line or line.startswith("WARNING"):
            continue
        names.append(split_pkgver(line.split()[0]))
    return names


def switch_repositories(system: System, channel: str = "edge") -> bool:
    """Point every versioned repository line at ``channel``.

    Returns True if the file changed.
    """
    content = system.read_file(PATHS.apk_repositories)
    updated = _RELEASE_RE.sub(channel, content)
    if updated == content:
        logger.info("Repositories already track %s (or carry no release version)", channel)
        return False
    system.write_file(PATHS.apk_repositories, updated)
    logger.info("Switched %s to %s", PATHS.apk_repositories, channel)
    return True
