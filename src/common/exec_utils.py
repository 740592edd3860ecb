"""Shell command execution returning captured output and exit code."""

from __future__ import annotations

import logging
import subprocess
from typing import NamedTuple, Optional

from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants

logger = logging.getLogger(__name__)


class ExecResult(NamedTuple):
    """Captured standard output and exit code of a command."""

    output: str
    exit_code: int

    @property
    def launched(self) -> bool:
        return self.exit_code != Constants.EXEC_LAUNCH_FAILURE


def exec_command(cmd: str, timeout: Optional[float] = None) -> ExecResult:
    """Run ``cmd`` through the shell and capture its standard output.

    A command that cannot be launched, or that exceeds ``timeout``, yields
    empty output and ``Constants.EXEC_LAUNCH_FAILURE`` as exit code.
    """
    with Timer() as t:
        try:
            result = subprocess.run(
                cmd,
                shell=True,
                stdout=subprocess.PIPE,
                text=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out after %s seconds: %s", timeout, cmd)
            return ExecResult("", Constants.EXEC_LAUNCH_FAILURE)
        except OSError as exc:
            logger.warning("Failed to execute command '%s': %s", cmd, exc)
            return ExecResult("", Constants.EXEC_LAUNCH_FAILURE)
    if is_debug_enabled(logger):
        logger.debug(
            "Command finished",
            extra=extra_context(
                event="exec", component="exec_utils", action="exec_command",
                outcome="success" if result.returncode == 0 else "failure",
                exit_code=result.returncode, duration_ms=t.duration_ms()
            )
        )
    return ExecResult(result.stdout or "", result.returncode)
