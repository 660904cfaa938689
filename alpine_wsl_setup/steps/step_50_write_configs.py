from __future__ import annotations

from ..lib.env import PATHS
from ..lib.templates import render_doas_conf, render_wsl_conf
from ..pipeline import BaseStep, SetupContext


class GenerateWslConfStep(BaseStep):
    """/etc/wsl.conf: default user, and OpenRC started on boot."""

    step_id = "50_generate_wsl_conf"
    description = "generating wsl config"
    failure_message = "couldn't generate wsl.conf"

    def run(self, ctx: SetupContext) -> None:
        ctx.system.write_file(PATHS.wsl_conf, render_wsl_conf(ctx.config.username))


class GenerateDoasConfStep(BaseStep):
    step_id = "55_generate_doas_conf"
    description = "giving admin group doas permissions"
    failure_message = "couldn't generate doas.conf"

    def run(self, ctx: SetupContext) -> None:
        ctx.system.write_file(PATHS.doas_conf, render_doas_conf(ctx.config.doas_group))
