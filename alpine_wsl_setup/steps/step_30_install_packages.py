from __future__ import annotations

import logging

from ..lib.apk import apk_add
from ..pipeline import BaseStep, SetupContext, Severity

logger = logging.getLogger(__name__)


class InstallPackagesStep(BaseStep):
    step_id = "30_install_packages"
    severity = Severity.FATAL
    description = "installing packages"
    failure_message = "could not install packages"

    def run(self, ctx: SetupContext) -> None:
        packages = list(ctx.config.packages)
        logger.info("Installing %d packages: %s", len(packages), " ".join(packages))
        apk_add(ctx.system, packages, update_index=True)
