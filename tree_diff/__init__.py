"""
tree-diff: compare sibling directory trees with git.

The trees themselves need not be under version control; git is only
used as the diff engine.
"""

from .colorize import AnsiColor, Console, TerminalConsole, colorize
from .errors import (
    DiffParseError,
    GitCommandError,
    GitError,
    InsideGitDirError,
    TreeDiffError,
)
from .folders_diff import DiffRunConfig, FoldersDiff, diff, diff_files
from .git_adapter import check_not_inside_git_repo
from .name_status import FileChange, Operation, parse_name_status

__all__ = [
    "AnsiColor",
    "Console",
    "DiffParseError",
    "DiffRunConfig",
    "FileChange",
    "FoldersDiff",
    "GitCommandError",
    "GitError",
    "InsideGitDirError",
    "Operation",
    "TerminalConsole",
    "TreeDiffError",
    "check_not_inside_git_repo",
    "colorize",
    "diff",
    "diff_files",
    "parse_name_status",
]
