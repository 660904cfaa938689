from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from .chroot import TARGET_PATH, chroot_argv, is_host_root
from .command import CmdResult, command_exists, run_cmd

logger = logging.getLogger(__name__)


class System:
    """The machine being provisioned.

    Every step reaches the filesystem and external commands through this
    object. Absolute paths are resolved under ``root``; when ``root`` is not
    the host's ``/`` (a mounted image), commands run through ``chroot root``
    and command lookups search the image's PATH, so files and commands hit
    the same system. With ``dry_run`` set, mutating commands and writes are
    only logged; read-only queries still execute.
    """

    def __init__(self, root: str = "/", *, dry_run: bool = False) -> None:
        self.root = root
        self.dry_run = dry_run

    @property
    def in_chroot(self) -> bool:
        return not is_host_root(self.root)

    def path(self, rel: str) -> Path:
        return Path(self.root) / rel.lstrip("/")

    def geteuid(self) -> int:
        return os.geteuid()

    def command_exists(self, name: str) -> bool:
        if not self.in_chroot:
            return command_exists(name)
        if any(self.is_executable(f"{d}/{name}") for d in TARGET_PATH):
            return True
        logger.warning("Command does not exist in %s: %s", self.root, name)
        return False

    def is_executable(self, rel: str) -> bool:
        p = self.path(rel)
        # Busybox applets in an image are absolute symlinks; do not follow
        # them out of the target root.
        if self.in_chroot and p.is_symlink():
            return True
        return p.is_file() and os.access(p, os.X_OK)

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        readonly: bool = False,
        interactive: bool = False,
    ) -> CmdResult:
        if self.in_chroot:
            argv = chroot_argv(self.root, argv)
        return run_cmd(
            argv,
            check=check,
            interactive=interactive,
            dry_run=self.dry_run and not readonly,
        )

    def read_file(self, rel: str) -> str:
        return self.path(rel).read_text(encoding="utf-8")

    def write_file(self, rel: str, contents: str) -> None:
        p = self.path(rel)
        if self.dry_run:
            logger.info("Would write %s", str(p))
            return
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(contents, encoding="utf-8")
        logger.info("Wrote %s", str(p))

    def append_file(self, rel: str, contents: str) -> None:
        p = self.path(rel)
        if self.dry_run:
            logger.info("Would append to %s: %r", str(p), contents)
            return
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("a", encoding="utf-8") as f:
            f.write(contents)
        logger.info("Appended to %s", str(p))
