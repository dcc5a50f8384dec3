"""khulnasoft-migrate: move a JavaScript project from khulnasoft to @khulnasoft/protect."""

__version__ = "0.1.0"

from khulnasoft_migrate.config import MigrationSettings
from khulnasoft_migrate.exceptions import CommandError, ManifestError, MigrationError
from khulnasoft_migrate.migrator import MigrationOutcome, MigrationResult, Migrator
from khulnasoft_migrate.package_manager import PackageManager, detect_package_manager
from khulnasoft_migrate.verifier import MarkerPhraseClassifier, ProtectStatus

__all__ = [
    "CommandError",
    "ManifestError",
    "MarkerPhraseClassifier",
    "MigrationError",
    "MigrationOutcome",
    "MigrationResult",
    "MigrationSettings",
    "Migrator",
    "PackageManager",
    "ProtectStatus",
    "detect_package_manager",
]
