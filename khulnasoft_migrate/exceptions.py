"""Custom exceptions for khulnasoft-migrate."""


class MigrationError(Exception):
    """Base exception for all migration errors."""


class ManifestError(MigrationError):
    """Raised when package.json cannot be read or is not valid JSON."""


class CommandError(MigrationError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, argv: list[str], returncode: int, stderr: str = ""):
        self.argv = argv
        self.returncode = returncode
        self.stderr = stderr
        message = f"command failed (exit {returncode}): {' '.join(argv)}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)
