from __future__ import annotations

from ..pipeline import BaseStep, SetupContext, StepSkipped


class InstallPipToolsStep(BaseStep):
    step_id = "70_install_pip_tools"
    failure_message = "couldn't install pip packages"

    def __init__(self, pip: str = "pip3") -> None:
        self.pip = pip

    @property
    def description(self) -> str:
        return f"installing pip packages via {self.pip}"

    def applies(self, ctx: SetupContext) -> bool:
        return bool(ctx.config.pip_packages)

    def run(self, ctx: SetupContext) -> None:
        packages = list(ctx.config.pip_packages)
        if not ctx.system.command_exists(self.pip):
            raise StepSkipped(f"{self.pip} is not installed, skipping {' '.join(packages)}")
        ctx.system.run([self.pip, "install", *packages])
