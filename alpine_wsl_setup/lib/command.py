from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandError(RuntimeError):
    """A command exited non-zero while the caller required success."""

    def __init__(self, result: CmdResult) -> None:
        self.result = result
        msg = f"Command failed ({result.returncode}): {fmt_argv(result.argv)}"
        if result.stderr.strip():
            msg += f"\n{result.stderr.strip()}"
        super().__init__(msg)


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def command_exists(name: str) -> bool:
    if shutil.which(name) is not None:
        return True
    logger.warning("Command does not exist: %s", name)
    return False


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    interactive: bool = False,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - Captures stdout/stderr unless interactive, in which case the child
      inherits the terminal (needed for passwd prompts).
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    if dry_run:
        logger.info("DRY-RUN %s", fmt_argv(argv_list))
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    logger.info("CMD %s", fmt_argv(argv_list))

    if interactive:
        p = subprocess.run(
            argv_list,
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        )
        result = CmdResult(argv=argv_list, returncode=p.returncode, stdout="", stderr="")
    else:
        p = subprocess.run(
            argv_list,
            input=input_text,
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        )
        if p.stdout:
            logger.debug("STDOUT %s", p.stdout.strip())
        if p.stderr:
            logger.debug("STDERR %s", p.stderr.strip())
        result = CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout, stderr=p.stderr)

    if check and result.returncode != 0:
        raise CommandError(result)

    return result
