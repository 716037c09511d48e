"""
External process execution for tree-diff.

Every git invocation goes through run_command so that launching,
capturing and logging are handled in one place. The git helpers accept
any callable with the same signature, which lets tests substitute a
fake without touching the parsing or classification logic.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence, Union

from .errors import CommandLaunchError

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """
    Exit status and captured output of a finished command.

    stdout is kept as bytes because git diff output is used verbatim as
    a patch payload and must not be re-encoded.
    """

    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


class CommandExecutor(Protocol):
    def __call__(
        self,
        args: Sequence[str],
        cwd: Optional[Union[str, Path]] = None,
        env: Optional[Mapping[str, str]] = None,
        verbose: bool = False,
    ) -> CommandOutput:
        ...


def run_command(
    args: Sequence[str],
    cwd: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
    verbose: bool = False,
) -> CommandOutput:
    """
    Run a command to completion and return its exit status and output.

    A non-zero exit status is not an error here; interpreting it is up
    to the caller. Only a failure to start the process raises
    CommandLaunchError.
    """

    cmd = list(args)
    log = LOG.info if verbose else LOG.debug
    log("Running command: %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        completed = subprocess.run(
            cmd,
            cwd=None if cwd is None else str(cwd),
            env=None if env is None else dict(env),
            check=False,
            capture_output=True,
        )
    except OSError as exc:
        raise CommandLaunchError(f"failed to execute {cmd[0]}: {exc}") from exc

    output = CommandOutput(
        returncode=completed.returncode,
        stdout=completed.stdout or b"",
        stderr=completed.stderr or b"",
    )
    if output.returncode != 0:
        LOG.debug(
            "%s exited with status %d, stderr: %s",
            cmd[0],
            output.returncode,
            output.stderr_text,
        )
    return output
