from __future__ import annotations

from ..lib.openrc import rc_update_add
from ..pipeline import BaseStep, SetupContext


class EnableServiceStep(BaseStep):
    """rc-update add for one service; one step per service so each can warn alone."""

    def __init__(self, service: str) -> None:
        self.service = service
        self.step_id = f"60_enable_{service}"
        self.description = f"enabling {service} service"
        self.failure_message = f"couldn't enable {service} service"

    def run(self, ctx: SetupContext) -> None:
        rc_update_add(ctx.system, self.service)
