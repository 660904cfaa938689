from __future__ import annotations

from ..lib.apk import switch_repositories
from ..pipeline import BaseStep, SetupContext


class SwitchRepositoriesStep(BaseStep):
    step_id = "10_switch_repositories"
    description = "changing default repositories"
    failure_message = "could not change repositories"

    def __init__(self, channel: str = "edge") -> None:
        self.channel = channel

    def run(self, ctx: SetupContext) -> None:
        switch_repositories(ctx.system, self.channel)
