"""Lookup of the compiler configuration root directory.

Environment and executable location are passed in rather than read from the
process so the lookup can be exercised in isolation.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Mapping, Optional

from constants import Constants

logger = logging.getLogger(__name__)


def get_compiler_root(
    environ: Optional[Mapping[str, str]] = None,
    executable: Optional[str] = None,
    exists: Callable[[str], bool] = os.path.isdir,
    configured: Optional[str] = None,
) -> str:
    """Return the compiler root directory as a forward-slash path.

    Resolution order: ``configured`` value, ``CMSIS_COMPILER_ROOT`` in
    ``environ``, then ``<executable dir>/../etc`` when that directory exists.
    Returns an empty string when none applies.
    """
    if environ is None:
        environ = os.environ
    if executable is None:
        executable = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable

    root = configured or environ.get(Constants.ENV_COMPILER_ROOT, "")
    if not root and executable:
        candidate = str(Path(executable).absolute().parent.parent / "etc")
        if exists(candidate):
            root = candidate
        else:
            logger.debug("No compiler root at %s", candidate)
    if not root:
        return ""
    return Path(root).resolve(strict=False).as_posix()
