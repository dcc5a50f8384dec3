"""Migration runner: a 7-step linear pipeline from khulnasoft to @khulnasoft/protect."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import structlog

from khulnasoft_migrate.command import CommandRunner, run_command
from khulnasoft_migrate.config import MigrationSettings
from khulnasoft_migrate.manifest import has_dependency, rewrite_token
from khulnasoft_migrate.package_manager import PackageManager, detect_package_manager
from khulnasoft_migrate.progress import MigrationStep, ProgressTracker
from khulnasoft_migrate.verifier import MarkerPhraseClassifier, OutputClassifier, ProtectStatus

log = structlog.get_logger("khulnasoft_migrate.migrator")


class MigrationOutcome(str, Enum):
    NO_MANIFEST = "no_manifest"
    NOTHING_TO_UPGRADE = "nothing_to_upgrade"
    MIGRATED = "migrated"
    MIGRATED_NOT_PATCHING = "migrated_not_patching"


@dataclass
class MigrationResult:
    """Migrator return value."""

    outcome: MigrationOutcome
    exit_code: int
    message: str
    package_manager: PackageManager | None = None


class Migrator:
    """
    Run the migration pipeline against one project directory.

    Step 1: detect package manager (package.json + yarn.lock)
    Step 2: detect the old dependency in package.json
    Step 3: uninstall the old package
    Step 4: rewrite the literal token in package.json
    Step 5: install the new package
    Step 6: run the protect check and classify its output
    Step 7: build the final result

    Every step is awaited before the next starts. A failing command stops
    the pipeline; nothing already done is undone.
    """

    def __init__(
        self,
        project_dir: Path | str,
        settings: MigrationSettings | None = None,
        runner: CommandRunner = run_command,
        classifier: OutputClassifier | None = None,
    ) -> None:
        self.project_dir = Path(project_dir)
        self.settings = settings or MigrationSettings()
        self.runner = runner
        self.classifier = classifier or MarkerPhraseClassifier(
            self.settings.nothing_to_patch_markers
        )
        self.progress = ProgressTracker()

    @property
    def manifest_path(self) -> Path:
        return self.project_dir / self.settings.manifest_file

    async def run(self) -> MigrationResult:
        s = self.settings
        progress = self.progress
        current: MigrationStep | None = None

        try:
            current = MigrationStep.DETECT_PACKAGE_MANAGER
            progress.start_step(current)
            log.info(
                "migration.step",
                step=current.value,
                detail=f"Checking {s.manifest_file} project in the current directory.",
            )
            manager = detect_package_manager(self.project_dir, s)
            if manager is None:
                progress.fail_step(current, f"no {s.manifest_file}")
                return self._finish(
                    MigrationOutcome.NO_MANIFEST,
                    1,
                    f"No {s.manifest_file}. You need to run this command only "
                    "in a folder with an npm or yarn project",
                )
            progress.complete_step(current, detail=manager.value)

            current = MigrationStep.DETECT_DEPENDENCY
            progress.start_step(current)
            if not has_dependency(self.manifest_path, s.old_package):
                progress.complete_step(current, detail="not listed")
                return self._finish(
                    MigrationOutcome.NOTHING_TO_UPGRADE,
                    0,
                    f"There is no `{s.old_package}` package listed as a dependency. "
                    "Nothing to upgrade.",
                    manager,
                )
            progress.complete_step(current, detail="listed")

            current = MigrationStep.UNINSTALL
            progress.start_step(current)
            log.info(
                "migration.step",
                step=current.value,
                detail=f"Removing {s.old_package} package from dependencies.",
            )
            await self.runner(manager.uninstall_command(s.old_package), self.project_dir)
            progress.complete_step(current)

            current = MigrationStep.UPDATE_MANIFEST
            progress.start_step(current)
            log.info(
                "migration.step", step=current.value, detail=f"Updating {s.manifest_file} file."
            )
            changed = rewrite_token(self.manifest_path, s.rewrite_old, s.rewrite_new)
            progress.complete_step(current, detail="changed" if changed else "unchanged")

            current = MigrationStep.INSTALL
            progress.start_step(current)
            log.info(
                "migration.step",
                step=current.value,
                detail=f"Adding {s.new_package} package to dependencies.",
            )
            await self.runner(manager.install_command(s.new_package_spec), self.project_dir)
            progress.complete_step(current)

            current = MigrationStep.VERIFY
            progress.start_step(current)
            output = await self.runner(manager.exec_command(s.check_binary), self.project_dir)
            status = self.classifier.classify(output)
            progress.complete_step(current, detail=status.value)

        except Exception as e:
            if current is not None:
                progress.fail_step(current, str(e))
            log.error("migration.failed", step=current.value if current else None, error=str(e))
            raise

        commit_hint = (
            f"Review and commit the changes to {s.manifest_file} and {manager.lockfile}."
        )
        if status is ProtectStatus.NOTHING_TO_PATCH:
            return self._finish(
                MigrationOutcome.MIGRATED_NOT_PATCHING,
                0,
                "All done. But we've detected that Khulnasoft Protect is not patching "
                f"anything. {commit_hint}",
                manager,
            )
        return self._finish(MigrationOutcome.MIGRATED, 0, f"All done. {commit_hint}", manager)

    def _finish(
        self,
        outcome: MigrationOutcome,
        exit_code: int,
        message: str,
        manager: PackageManager | None = None,
    ) -> MigrationResult:
        self.progress.skip_pending(outcome.value, keep=(MigrationStep.REPORT,))
        self.progress.start_step(MigrationStep.REPORT)
        self.progress.complete_step(MigrationStep.REPORT, detail=outcome.value)
        log.info("migration.finished", outcome=outcome.value, exit_code=exit_code)
        return MigrationResult(
            outcome=outcome,
            exit_code=exit_code,
            message=message,
            package_manager=manager,
        )
