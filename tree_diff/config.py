"""
Configuration model for tree-diff.

The CLI constructs a Config instance and passes it down to the diff
helpers so behavior can be adjusted without relying on global state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class Config:
    """
    Top-level configuration for a tree-diff run.
    """

    one: str
    other: str
    name_status: bool = False
    color: str = "auto"
    verbosity: int = 0
    git_exec_path: Optional[str] = None

    @property
    def verbose(self) -> bool:
        return self.verbosity > 0

    def environment(self) -> Dict[str, str]:
        """
        Return the environment git is run with.

        This is a copy of the current process environment, with
        GIT_EXEC_PATH pointing at git_exec_path when one is configured.
        """

        env = dict(os.environ)
        if self.git_exec_path:
            env["GIT_EXEC_PATH"] = self.git_exec_path
        return env
