"""
Git integration for tree-diff.

This module locates the git binary and guards against running diff
operations inside an existing git work tree. A common setup is to keep
$HOME under version control for dotfiles, which silently turns a
"compare two directories" request into a diff against that repository.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from .errors import CommandLaunchError, GitError, InsideGitDirError
from .process import CommandExecutor, run_command

LOG = logging.getLogger(__name__)

# Some git versions print "Not a git repository", others "not a git repository".
_NOT_A_GIT_REPOSITORY = "ot a git repository"


def resolve_git_binary(env: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the git executable to invoke for the given environment.

    GIT_EXEC_PATH, when set, names the directory holding the binary.
    """

    exec_path = (env or {}).get("GIT_EXEC_PATH")
    if exec_path:
        return os.path.join(exec_path, "git")
    return "git"


def check_not_inside_git_repo(
    path: Union[str, Path],
    verbose: bool = False,
    env: Optional[Mapping[str, str]] = None,
    executor: CommandExecutor = run_command,
) -> None:
    """
    Raise InsideGitDirError if path is inside a git work tree.

    The probe is `git rev-parse --git-dir` run from path. Note the
    inverted polarity: the probe succeeding is the error case, and git
    failing with "not a git repository" is the healthy one. Any other
    failure raises GitError.
    """

    cmd = [resolve_git_binary(env), "rev-parse", "--git-dir"]
    try:
        output = executor(cmd, cwd=path, env=env, verbose=verbose)
    except CommandLaunchError as exc:
        raise GitError("Error executing rev-parse") from exc

    if output.returncode == 0:
        git_dir = output.stdout_text.strip()
        LOG.debug("%s is inside git directory %s", path, git_dir)
        raise InsideGitDirError(path, git_dir)

    if _NOT_A_GIT_REPOSITORY not in output.stderr_text:
        raise GitError(
            f"Error executing rev-parse in {path} (exit status "
            f"{output.returncode}): {output.stderr_text.strip()}"
        )
