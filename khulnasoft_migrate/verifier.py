"""Classify the output of the ``khulnasoft-protect`` check command."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Protocol, runtime_checkable

from khulnasoft_migrate.config import MigrationSettings


class ProtectStatus(str, Enum):
    PATCHING = "patching"
    NOTHING_TO_PATCH = "nothing_to_patch"


@runtime_checkable
class OutputClassifier(Protocol):
    """Interface for deciding whether the protect check found work to do."""

    def classify(self, output: str) -> ProtectStatus: ...


class MarkerPhraseClassifier:
    """Substring match against known "nothing to do" phrases."""

    def __init__(self, markers: Iterable[str] | None = None) -> None:
        if markers is None:
            markers = MigrationSettings().nothing_to_patch_markers
        self.markers = tuple(markers)

    def classify(self, output: str) -> ProtectStatus:
        if any(marker in output for marker in self.markers):
            return ProtectStatus.NOTHING_TO_PATCH
        return ProtectStatus.PATCHING
