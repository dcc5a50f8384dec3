"""Package manager detection and per-manager command lines.

Detection only looks at directory entries: ``package.json`` must exist, and
``yarn.lock`` selects yarn over npm. Lockfile contents are never parsed.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from khulnasoft_migrate.config import MigrationSettings

logger = logging.getLogger(__name__)


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"

    @property
    def lockfile(self) -> str:
        return _LOCKFILES[self]

    def uninstall_command(self, package: str) -> list[str]:
        if self is PackageManager.NPM:
            return ["npm", "uninstall", package]
        return ["yarn", "remove", package]

    def install_command(self, package_spec: str) -> list[str]:
        if self is PackageManager.NPM:
            return ["npm", "install", package_spec]
        return ["yarn", "add", package_spec]

    def exec_command(self, binary: str) -> list[str]:
        """Run a binary from the project's installed packages."""
        if self is PackageManager.NPM:
            return ["npx", binary]
        return ["yarn", "run", binary]


_LOCKFILES: dict[PackageManager, str] = {
    PackageManager.NPM: "package-lock.json",
    PackageManager.YARN: "yarn.lock",
}


def detect_package_manager(
    project_dir: Path,
    settings: MigrationSettings | None = None,
) -> PackageManager | None:
    """Return the project's package manager, or None without a manifest."""
    settings = settings or MigrationSettings()
    entries = {p.name for p in Path(project_dir).iterdir()}

    if settings.manifest_file not in entries:
        logger.warning("No %s found in %s", settings.manifest_file, project_dir)
        return None

    if settings.yarn_lockfile in entries:
        logger.info("Detected package manager: yarn (found %s)", settings.yarn_lockfile)
        return PackageManager.YARN

    logger.info("Detected package manager: npm (no %s)", settings.yarn_lockfile)
    return PackageManager.NPM
