from __future__ import annotations

import logging

from ..lib.osrelease import is_alpine
from ..pipeline import BaseStep, SetupContext, Severity

logger = logging.getLogger(__name__)


class PreflightStep(BaseStep):
    step_id = "00_preflight"
    severity = Severity.FATAL
    description = "performing checks"
    failure_message = "preflight checks failed"

    def run(self, ctx: SetupContext) -> None:
        system = ctx.system
        if system.geteuid() != 0:
            raise RuntimeError("this script must be run as root")
        if not is_alpine(system):
            raise RuntimeError("this script is only for Alpine Linux")
        if not system.command_exists("apk"):
            raise RuntimeError("something is weird, apk is not installed")
        logger.info("Running as root on Alpine Linux with apk available")
