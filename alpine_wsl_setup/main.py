from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .lib.system import System
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import FatalStepError, PipelineResult, SetupContext, Step, run_pipeline
from .setup_config import SetupConfig, load_setup_config
from .steps import (
    AddMissingCompletionsStep,
    AddMissingDocsStep,
    AddUserToAdminGroupStep,
    EnableRootlessPodmanStep,
    EnableServiceStep,
    GenerateDoasConfStep,
    GenerateWslConfStep,
    InstallPackagesStep,
    InstallPipToolsStep,
    PreflightStep,
    SetLoginShellStep,
    SetPasswordStep,
    SwitchRepositoriesStep,
    UpdateSystemStep,
)

logger = logging.getLogger(__name__)

USERNAME_ENV = "WSL_USER"


def build_steps(cfg: SetupConfig) -> List[Step]:
    return [
        PreflightStep(),
        SwitchRepositoriesStep(),
        UpdateSystemStep(),
        InstallPackagesStep(),
        AddMissingCompletionsStep(),
        AddMissingDocsStep(),
        GenerateWslConfStep(),
        GenerateDoasConfStep(),
        AddUserToAdminGroupStep(),
        *[EnableServiceStep(s) for s in cfg.services],
        InstallPipToolsStep(),
        EnableRootlessPodmanStep(),
        SetPasswordStep(),
        SetLoginShellStep(),
    ]


def _log_summary(result: PipelineResult) -> None:
    logger.info(
        "Summary: ran=%s warned=%s skipped=%s",
        ",".join(result.ran_steps) or "-",
        ",".join(result.warned_steps) or "-",
        ",".join(result.skipped_steps) or "-",
    )


def run(cfg: SetupConfig, *, system: Optional[System] = None) -> PipelineResult:
    """Provision the system described by ``cfg``.

    Raises FatalStepError if a fatal step fails.
    """

    system = system or System(cfg.root, dry_run=cfg.dry_run)
    ctx = SetupContext(config=cfg, system=system)
    result = PipelineResult()

    logger.info("Provisioning Alpine WSL for user %s (root=%s dry_run=%s)", cfg.username, cfg.root, cfg.dry_run)
    try:
        run_pipeline(ctx=ctx, steps=build_steps(cfg), result=result)
    finally:
        _log_summary(result)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="alpine-wsl-setup",
        description="First-boot provisioning for Alpine Linux on WSL.",
    )
    p.add_argument(
        "username",
        nargs="?",
        default=os.environ.get(USERNAME_ENV),
        help=f"Default WSL user (falls back to ${USERNAME_ENV})",
    )
    p.add_argument("--config", default=None, help="YAML file overriding packages, services, ...")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to the setup log")
    p.add_argument("--root", default="/", help="Filesystem root to provision")
    p.add_argument("--dry-run", action="store_true", help="Log changes without making them")
    p.add_argument("--no-password", action="store_true", help="Do not prompt for the user password")
    p.add_argument("-v", "--verbose", action="store_true", help="Log command output")

    args = p.parse_args(argv)
    if not args.username:
        p.error(f"a username is required (argument or ${USERNAME_ENV})")

    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.config:
            cfg = load_setup_config(args.config, username=args.username)
        else:
            cfg = SetupConfig(username=args.username)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Could not load setup config %s: %s", args.config, e)
        return 1

    overrides = {"root": args.root, "dry_run": args.dry_run}
    if args.no_password:
        overrides["set_password"] = False
    cfg = cfg.with_overrides(**overrides)

    try:
        run(cfg)
    except FatalStepError as e:
        logger.error("Setup aborted at %s: %s", e.step_id, e)
        return 1
    return 0
