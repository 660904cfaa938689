from __future__ import annotations

import logging

from ..lib.accounts import (
    add_user_to_group,
    append_module,
    append_subids,
    set_login_shell,
    set_password,
)
from ..pipeline import BaseStep, SetupContext, StepSkipped

logger = logging.getLogger(__name__)


class _DefaultUserStep(BaseStep):
    """Steps that only make sense for a non-root default user."""

    def applies(self, ctx: SetupContext) -> bool:
        return not ctx.config.is_root_user


class AddUserToAdminGroupStep(_DefaultUserStep):
    step_id = "57_add_user_to_admin_group"
    description = "adding default user to admin group"
    failure_message = "couldn't add user to admin group"

    def run(self, ctx: SetupContext) -> None:
        add_user_to_group(ctx.system, ctx.config.username, ctx.config.admin_group)


class EnableRootlessPodmanStep(_DefaultUserStep):
    step_id = "80_enable_rootless_podman"
    description = "enabling rootless podman"
    failure_message = "couldn't enable rootless podman"

    def run(self, ctx: SetupContext) -> None:
        cfg = ctx.config
        append_module(ctx.system, cfg.rootless_module)
        append_subids(ctx.system, cfg.username, cfg.subid_start, cfg.subid_count)


class SetPasswordStep(_DefaultUserStep):
    step_id = "85_set_user_password"
    description = "set your user password"
    failure_message = "couldn't set user password"

    def applies(self, ctx: SetupContext) -> bool:
        return super().applies(ctx) and ctx.config.set_password

    def run(self, ctx: SetupContext) -> None:
        if not ctx.system.command_exists("passwd"):
            raise StepSkipped("passwd is not installed, skipping password setup")
        set_password(ctx.system, ctx.config.username)


class SetLoginShellStep(_DefaultUserStep):
    step_id = "90_set_login_shell"
    description = "setting default user shell"
    failure_message = "couldn't set default user shell"

    def run(self, ctx: SetupContext) -> None:
        shell = ctx.config.login_shell
        if not ctx.system.command_exists("chsh"):
            raise StepSkipped("chsh is not installed, keeping current login shell")
        if not ctx.system.is_executable(shell):
            raise StepSkipped(f"{shell} is not executable, keeping current login shell")
        set_login_shell(ctx.system, ctx.config.username, shell)
        logger.info("Login shell for %s is now %s", ctx.config.username, shell)
