"""
Diffing of two sibling directory trees with git.

Neither directory needs to be under version control: git is run from
the common parent with both directories as path arguments, which makes
it compare the trees directly. This only works when no ambient git
repository encloses them, so that is checked first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .errors import CommandLaunchError, GitCommandError, GitError
from .git_adapter import check_not_inside_git_repo, resolve_git_binary
from .name_status import FileChange, parse_name_status
from .process import CommandExecutor, run_command

LOG = logging.getLogger(__name__)

EMPTY_DIFF = b""


@dataclass(frozen=True)
class DiffRunConfig:
    """
    Flags for a single `git diff` invocation between two folders.

    The with_* methods return a new configuration; instances are never
    modified in place.
    """

    name_status: bool = False
    no_renames: bool = False
    z_option: bool = False
    no_index: bool = False

    def with_name_status(self) -> "DiffRunConfig":
        return replace(self, name_status=True)

    def with_no_renames(self) -> "DiffRunConfig":
        return replace(self, no_renames=True)

    def with_z_option(self) -> "DiffRunConfig":
        return replace(self, z_option=True)

    def with_no_index(self) -> "DiffRunConfig":
        return replace(self, no_index=True)

    def git_args(self) -> List[str]:
        """Return the `git diff` flags selected by this configuration."""

        args = ["--no-color"]
        if self.no_index:
            args.append("--no-index")
        if self.name_status:
            args.append("--name-status")
        if self.no_renames:
            args.append("--no-renames")
        if self.z_option:
            args.append("-z")
        return args


@dataclass(frozen=True)
class FoldersDiff:
    """
    Execute git diff between two sibling folders.
    """

    verbose: bool = False
    environment: Optional[Mapping[str, str]] = None
    config: DiffRunConfig = field(default_factory=DiffRunConfig)
    executor: CommandExecutor = run_command

    def run(self, one: Union[str, Path], other: Union[str, Path]) -> bytes:
        """
        Return the diff between one and other, or b"" if they are identical.

        Raises ValueError if the two paths are not siblings,
        InsideGitDirError if they live inside a git work tree and GitError
        if git fails.
        """

        one = Path(one)
        other = Path(other)
        if one.parent != other.parent:
            raise ValueError(
                f"Paths 'one' ({one}) and 'other' ({other}) must be sibling directories."
            )

        if not self.config.no_index:
            check_not_inside_git_repo(
                one, verbose=self.verbose, env=self.environment, executor=self.executor
            )

        root = one.parent
        cmd = [
            resolve_git_binary(self.environment),
            "diff",
            *self.config.git_args(),
            "--",
            str(one.relative_to(root)),
            str(other.relative_to(root)),
        ]
        try:
            output = self.executor(
                cmd, cwd=root, env=self.environment, verbose=self.verbose
            )
        except CommandLaunchError as exc:
            raise GitError("Error executing 'git diff'") from exc

        if output.returncode == 0:
            return EMPTY_DIFF

        # git diff exits with 1 when the trees differ; anything written to
        # stderr means it actually failed.
        if output.stderr:
            raise GitCommandError(
                f"Error executing 'git diff': exit status {output.returncode}",
                returncode=output.returncode,
                stderr=output.stderr_text,
            )
        return output.stdout


def diff(
    one: Union[str, Path],
    other: Union[str, Path],
    verbose: bool = False,
    environment: Optional[Mapping[str, str]] = None,
) -> bytes:
    """
    Calculate the diff between two sibling directory trees.

    The diff is returned as bytes, exactly as git produced it, so it can
    be written to a file or applied as a patch without re-encoding.
    """

    return FoldersDiff(verbose=verbose, environment=environment).run(one, other)


def diff_files(
    one: Union[str, Path],
    other: Union[str, Path],
    verbose: bool = False,
    environment: Optional[Mapping[str, str]] = None,
) -> List[FileChange]:
    """
    Return the changed files without computing renames or copies.

    Each file name is relative to the one/other directories.
    """

    config = DiffRunConfig().with_z_option().with_name_status().with_no_renames()
    raw = FoldersDiff(verbose=verbose, environment=environment, config=config).run(
        one, other
    )
    changes = parse_name_status(raw.decode("utf-8", errors="surrogateescape"))
    LOG.debug("Found %d changed files between %s and %s", len(changes), one, other)
    return changes
