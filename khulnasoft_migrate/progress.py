"""Per-step status of a migration run, reported by ``--summary``."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any


class MigrationStep(str, Enum):
    DETECT_PACKAGE_MANAGER = "detect_package_manager"
    DETECT_DEPENDENCY = "detect_dependency"
    UNINSTALL = "uninstall"
    UPDATE_MANIFEST = "update_manifest"
    INSTALL = "install"
    VERIFY = "verify"
    REPORT = "report"


class StepStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class StepRecord:
    step: MigrationStep
    status: StepStatus = StepStatus.PENDING
    started_at: float | None = None
    finished_at: float | None = None
    detail: str = ""
    error: str | None = None

    @property
    def duration(self) -> float | None:
        if self.started_at is not None and self.finished_at is not None:
            return round(self.finished_at - self.started_at, 2)
        return None


class ProgressTracker:
    """One record per pipeline step, all starting out pending.

    Only a running step can be completed or failed. Steps an early exit never
    reaches are marked skipped by ``skip_pending`` so the summary shows why
    they did not run.
    """

    def __init__(self) -> None:
        self._records = {step: StepRecord(step) for step in MigrationStep}

    @property
    def steps(self) -> list[StepRecord]:
        return list(self._records.values())

    def status_of(self, step: MigrationStep) -> StepStatus:
        return self._records[step].status

    def start_step(self, step: MigrationStep) -> None:
        record = self._records[step]
        record.status = StepStatus.RUNNING
        record.started_at = time.monotonic()

    def complete_step(self, step: MigrationStep, detail: str = "") -> None:
        self._finish(step, StepStatus.COMPLETED, detail=detail)

    def fail_step(self, step: MigrationStep, error: str) -> None:
        self._finish(step, StepStatus.FAILED, error=error)

    def skip_step(self, step: MigrationStep, reason: str) -> None:
        record = self._records[step]
        if record.status is StepStatus.PENDING:
            record.status = StepStatus.SKIPPED
            record.detail = reason

    def skip_pending(self, reason: str, keep: tuple[MigrationStep, ...] = ()) -> None:
        """Skip every still-pending step except those in *keep*."""
        for step in MigrationStep:
            if step not in keep:
                self.skip_step(step, reason)

    def get_summary(self) -> dict[str, Any]:
        return {
            "steps": [
                {
                    "step": r.step.value,
                    "status": r.status.value,
                    "duration": r.duration,
                    "detail": r.detail,
                    "error": r.error,
                }
                for r in self.steps
            ],
            "total_duration": round(sum(r.duration or 0 for r in self.steps), 2),
        }

    def _finish(
        self,
        step: MigrationStep,
        status: StepStatus,
        detail: str = "",
        error: str | None = None,
    ) -> None:
        record = self._records[step]
        if record.status is not StepStatus.RUNNING:
            return
        record.status = status
        record.finished_at = time.monotonic()
        record.detail = detail
        record.error = error
