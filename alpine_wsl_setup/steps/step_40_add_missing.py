from __future__ import annotations

from ..lib.apk import apk_add
from ..lib.suffix import add_missing
from ..pipeline import BaseStep, SetupContext


class AddMissingCompletionsStep(BaseStep):
    step_id = "40_add_missing_completions"
    description = "adding missing bash-completion"
    failure_message = "couldn't add missing bash-completions"

    def run(self, ctx: SetupContext) -> None:
        add_missing(ctx.system, ctx.config.completion_suffix)


class AddMissingDocsStep(BaseStep):
    """Install the man-page toolchain, then every missing -doc package."""

    step_id = "45_add_missing_docs"
    description = "adding missing man-pages"
    failure_message = "couldn't add missing docs"

    def run(self, ctx: SetupContext) -> None:
        apk_add(ctx.system, list(ctx.config.doc_packages))
        add_missing(ctx.system, ctx.config.doc_suffix)
