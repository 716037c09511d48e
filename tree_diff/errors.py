"""
Custom exception types used across tree-diff.

Defining explicit error classes makes it easier for the CLI and library
callers to tell an unsafe workspace apart from a broken git invocation
or an unexpected tool output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class TreeDiffError(Exception):
    """Base class for all tree-diff specific errors."""


class CommandLaunchError(TreeDiffError):
    """Raised when an external command cannot be started at all."""


class GitError(TreeDiffError):
    """Raised when git operations fail."""


class GitCommandError(GitError):
    """
    Raised when git exits with a failure status and reports it on stderr.

    Both the description of the failing command and the captured stderr
    are kept so callers can print useful diagnostics.
    """

    def __init__(self, message: str, returncode: int, stderr: str) -> None:
        super().__init__(f"{message}. Stderr: \n{stderr}")
        self.returncode = returncode
        self.stderr = stderr


class InsideGitDirError(TreeDiffError):
    """
    Raised when a directory used for diffing lives inside a git work tree.

    git would diff against the ambient repository instead of comparing
    the two directories, so the caller has to pick another location.
    """

    def __init__(self, path: Union[str, Path], git_dir: str) -> None:
        super().__init__(
            f"Cannot diff/patch because the temporary directory ({path}) is "
            f"inside a git directory ({git_dir})."
        )
        self.path = Path(path)
        self.git_dir = git_dir


class DiffParseError(TreeDiffError):
    """Raised when parsing git name-status output fails."""
