"""Find sibling packages (``<base>-doc``, ``<base>-bash-completion``, ...)
that are missing for the packages already installed.

Base-token grammar: the longest prefix of a package name matching
``[a-z-]+[a-z]``, i.e. a run of lowercase letters and hyphens that ends in a
letter. Everything after it (digits, version tails, uppercase) is dropped.
Names that do not start with such a run have no base token and are skipped.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from .apk import apk_add, apk_has_package, apk_list_installed
from .system import System

logger = logging.getLogger(__name__)

_BASE_TOKEN_RE = re.compile(r"[a-z-]+[a-z]")


def base_token(name: str) -> Optional[str]:
    m = _BASE_TOKEN_RE.match(name)
    return m.group(0) if m else None


def candidate_bases(installed: Iterable[str], suffix: str) -> List[str]:
    """Bases worth probing for ``<base>-<suffix>``, de-duplicated, in order."""
    tail = f"-{suffix}"
    installed = list(installed)
    present = set(installed)

    bases: List[str] = []
    for name in installed:
        if name.endswith(tail):
            continue
        base = base_token(name)
        if base is None:
            logger.debug("No base token in %r, skipping", name)
            continue
        if base + tail in present or base in bases:
            continue
        bases.append(base)
    return bases


def find_missing(system: System, suffix: str) -> List[str]:
    """Sibling packages that exist in the repositories but are not installed."""
    missing: List[str] = []
    for base in candidate_bases(apk_list_installed(system), suffix):
        pkg = f"{base}-{suffix}"
        if apk_has_package(system, pkg):
            missing.append(pkg)
    return missing


def add_missing(system: System, suffix: str) -> List[str]:
    """Install every missing ``-<suffix>`` sibling in one batch.

    Returns the packages that were requested.
    """
    packages = find_missing(system, suffix)
    if not packages:
        logger.info("No missing -%s packages", suffix)
        return packages
    logger.info("Adding %d missing -%s packages: %s", len(packages), suffix, " ".join(packages))
    apk_add(system, packages)
    return packages
