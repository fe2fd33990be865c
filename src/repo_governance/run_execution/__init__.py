"""Run execution domain exports."""

from .provisioning_run_use_case import RunExecutionError, execute_provisioning_run
from .provisioning_workflow import IncompleteConfigurationError, run_provisioning_workflow
from .run_contracts import (
    OutcomeStatus,
    RunRequest,
    StepResult,
    StepStatus,
    WorkflowOutcome,
)
from .step_executor import execute_step

__all__ = [
    "IncompleteConfigurationError",
    "OutcomeStatus",
    "RunExecutionError",
    "RunRequest",
    "StepResult",
    "StepStatus",
    "WorkflowOutcome",
    "execute_provisioning_run",
    "execute_step",
    "run_provisioning_workflow",
]
