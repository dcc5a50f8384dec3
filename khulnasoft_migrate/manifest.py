"""package.json reads and the in-place text rewrite."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from khulnasoft_migrate.exceptions import ManifestError

log = structlog.get_logger("khulnasoft_migrate.manifest")

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


def _read_text(manifest_path: Path) -> str:
    # newline="" keeps CRLF line endings intact for the write-back.
    try:
        with manifest_path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"cannot read {manifest_path}: {e}") from e


def load_manifest(manifest_path: Path) -> dict:
    content = _read_text(manifest_path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"invalid JSON in {manifest_path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} does not contain a JSON object")
    return data


def has_dependency(manifest_path: Path, name: str) -> bool:
    """True when *name* is a key of ``dependencies`` or ``devDependencies``."""
    data = load_manifest(manifest_path)
    for section in DEPENDENCY_SECTIONS:
        deps = data.get(section)
        if isinstance(deps, dict) and name in deps:
            return True
    return False


def rewrite_token(manifest_path: Path, old: str, new: str) -> bool:
    """Replace the first literal *old* with *new* and write the file back.

    This is a plain text substitution over the whole file, not an edit of a
    dependency entry. The file is rewritten even when *old* is absent, with
    every other character (line endings included) left as it was.
    Returns whether the content changed.
    """
    content = _read_text(manifest_path)
    updated = content.replace(old, new, 1)
    with manifest_path.open("w", encoding="utf-8", newline="") as f:
        f.write(updated)

    changed = updated != content
    log.info("manifest.rewritten", path=str(manifest_path), token=old, changed=changed)
    return changed
