"""Async subprocess helper for package manager and check commands."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path

import structlog

from khulnasoft_migrate.exceptions import CommandError

log = structlog.get_logger("khulnasoft_migrate.command")

CommandRunner = Callable[[list[str], Path], Awaitable[str]]


async def run_command(cmd: list[str], cwd: Path) -> str:
    """Run *cmd* in *cwd* and return its stdout with newlines removed.

    Stderr output is logged as a warning but does not fail the call.
    Raises ``CommandError`` on non-zero exit code or a missing executable.
    No timeout is applied.
    """
    log.info("command.run", cmd=" ".join(cmd), cwd=str(cwd))
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise CommandError(cmd, 127, str(e)) from e

    stdout, stderr = await proc.communicate()
    err = stderr.decode(errors="replace").strip()
    if err:
        log.warning("command.stderr", cmd=" ".join(cmd), stderr=err)
    if proc.returncode != 0:
        raise CommandError(cmd, proc.returncode, err)

    return "".join(stdout.decode(errors="replace").split("\n"))
