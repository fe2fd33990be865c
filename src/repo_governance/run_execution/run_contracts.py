"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from repo_governance.configuration.config_scaffold_builder import DEFAULT_CONFIG_FILENAME


class StepStatus(str, Enum):
    """Outcome status of one provisioning step."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one remote mutation, consumed immediately by the workflow."""

    step_name: str
    status: StepStatus
    cause: str | None

    @property
    def failed(self) -> bool:
        return self.status is StepStatus.FAILED

    @staticmethod
    def succeeded(step_name: str) -> StepResult:
        return StepResult(step_name=step_name, status=StepStatus.SUCCEEDED, cause=None)

    @staticmethod
    def failure(step_name: str, error: Exception) -> StepResult:
        return StepResult(step_name=step_name, status=StepStatus.FAILED, cause=str(error))


class OutcomeStatus(str, Enum):
    """Aggregate status of one workflow run."""

    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class WorkflowOutcome:
    """Externally observable result of one workflow run."""

    status: OutcomeStatus
    completed_steps: tuple[str, ...]
    failed_step: str | None = None
    cause: str | None = None

    @property
    def exit_code(self) -> int:
        return 0 if self.status is OutcomeStatus.COMPLETED else 1

    @staticmethod
    def completed(completed_steps: tuple[str, ...]) -> WorkflowOutcome:
        return WorkflowOutcome(status=OutcomeStatus.COMPLETED, completed_steps=completed_steps)

    @staticmethod
    def aborted_at(
        failed_step: str, cause: str | None, completed_steps: tuple[str, ...]
    ) -> WorkflowOutcome:
        return WorkflowOutcome(
            status=OutcomeStatus.ABORTED,
            completed_steps=completed_steps,
            failed_step=failed_step,
            cause=cause,
        )


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one provisioning run."""

    config_path: str = DEFAULT_CONFIG_FILENAME
    debug: bool = False
    dry_run: bool = False
