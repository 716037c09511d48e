"""
Logging helpers for tree-diff.

Only simple configuration based on a verbosity level is provided; the
library modules log through module-level loggers and never configure
handlers themselves.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int, stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger based on a verbosity count.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG

    Log records go to stderr unless another stream is given, keeping
    stdout free for the diff itself.
    """

    level = _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stream if stream is not None else sys.stderr,
    )
