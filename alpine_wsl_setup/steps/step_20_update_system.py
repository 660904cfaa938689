from __future__ import annotations

from ..lib.apk import apk_update, apk_upgrade
from ..pipeline import BaseStep, SetupContext


class UpdateSystemStep(BaseStep):
    step_id = "20_update_system"
    description = "updating system"
    failure_message = "could not update packages"

    def run(self, ctx: SetupContext) -> None:
        apk_update(ctx.system)
        apk_upgrade(ctx.system)
