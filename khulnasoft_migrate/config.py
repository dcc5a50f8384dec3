"""Migration constants: package names, file names and marker phrases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MigrationSettings:
    old_package: str = "khulnasoft"
    new_package: str = "@khulnasoft/protect"
    new_package_tag: str = "latest"
    check_binary: str = "khulnasoft-protect"
    manifest_file: str = "package.json"
    # Its presence selects yarn; npm otherwise.
    yarn_lockfile: str = "yarn.lock"
    # Literal text replacement applied to the manifest, not a dependency rename.
    rewrite_old: str = "khulnasoft protect"
    rewrite_new: str = "khulnasoft-protect"
    nothing_to_patch_markers: tuple[str, ...] = (
        "No .khulnasoft file found",
        "Nothing to patch",
    )

    @property
    def new_package_spec(self) -> str:
        return f"{self.new_package}@{self.new_package_tag}"
