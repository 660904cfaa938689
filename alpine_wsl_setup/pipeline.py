from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .setup_config import SetupConfig
from .lib.system import System

logger = logging.getLogger(__name__)


class Severity(enum.Enum):
    """What a failing step does to the run."""

    FATAL = "fatal"
    RECOVERABLE = "recoverable"


class Status(enum.Enum):
    SUCCEEDED = "succeeded"
    WARNED = "warned"
    SKIPPED = "skipped"
    FATAL = "fatal"


class FatalStepError(RuntimeError):
    def __init__(self, step_id: str, message: str) -> None:
        self.step_id = step_id
        super().__init__(message)


class StepSkipped(Exception):
    """Raised from inside a step that found it has nothing to do."""


@dataclass
class SetupContext:
    config: SetupConfig
    system: System


class Step(Protocol):
    """A single provisioning step."""

    step_id: str
    severity: Severity
    description: str
    failure_message: str

    def applies(self, ctx: SetupContext) -> bool:
        ...

    def run(self, ctx: SetupContext) -> None:
        ...


class BaseStep:
    severity = Severity.RECOVERABLE

    def applies(self, ctx: SetupContext) -> bool:
        return True


@dataclass(frozen=True)
class StepOutcome:
    step_id: str
    status: Status
    error: Optional[str] = None


@dataclass
class PipelineResult:
    outcomes: List[StepOutcome] = field(default_factory=list)

    def _ids(self, status: Status) -> List[str]:
        return [o.step_id for o in self.outcomes if o.status is status]

    @property
    def ran_steps(self) -> List[str]:
        return self._ids(Status.SUCCEEDED)

    @property
    def warned_steps(self) -> List[str]:
        return self._ids(Status.WARNED)

    @property
    def skipped_steps(self) -> List[str]:
        return self._ids(Status.SKIPPED)


def run_pipeline(
    *,
    ctx: SetupContext,
    steps: Sequence[Step],
    result: Optional[PipelineResult] = None,
) -> PipelineResult:
    """Run steps in order.

    RECOVERABLE failures are logged as warnings and the next step runs.
    FATAL failures are logged as errors and raised as FatalStepError; no
    later step runs.
    """

    result = result if result is not None else PipelineResult()

    for step in steps:
        if not step.applies(ctx):
            logger.debug("Skipping step %s (not applicable)", step.step_id)
            result.outcomes.append(StepOutcome(step.step_id, Status.SKIPPED))
            continue

        logger.info("%s", step.description)
        try:
            step.run(ctx)
        except StepSkipped as e:
            logger.warning("%s", e)
            result.outcomes.append(StepOutcome(step.step_id, Status.SKIPPED, str(e)))
            continue
        except Exception as e:
            if step.severity is Severity.FATAL:
                logger.error("%s: %s", step.failure_message, e)
                result.outcomes.append(StepOutcome(step.step_id, Status.FATAL, str(e)))
                raise FatalStepError(step.step_id, step.failure_message) from e
            logger.warning("%s: %s", step.failure_message, e)
            result.outcomes.append(StepOutcome(step.step_id, Status.WARNED, str(e)))
            continue

        result.outcomes.append(StepOutcome(step.step_id, Status.SUCCEEDED))

    return result
