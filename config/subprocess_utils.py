"""Subprocess execution with safety checks and timing.

Security Note:
    System values such as the computer name come from macOS command line
    utilities (scutil). All commands are validated against an allowlist in
    ALLOWED_SUBPROCESS_COMMANDS and shell=False is always used.

Usage:
    from config.subprocess_utils import safe_run

    result = safe_run(['scutil', '--get', 'ComputerName'])
    if result.returncode == 0:
        name = result.stdout.strip()
"""

# nosec B404 - subprocess usage is required and validated via allowlist
import subprocess
import time
from pathlib import Path
from typing import List, Optional

from config.constants import ALLOWED_SUBPROCESS_COMMANDS, INTERVALS
from config.exceptions import SubprocessError
from config.logging_config import get_logger, log_subprocess_call

logger = get_logger(__name__)


def safe_run(
    cmd: List[str], timeout: Optional[float] = None, check_allowed: bool = True, **kwargs
) -> subprocess.CompletedProcess:
    """Run a subprocess command with safety checks.

    Validates the command against an allowlist, captures text output and
    applies a timeout so a hung system utility cannot block the UI forever.

    Args:
        cmd: Command and arguments as list.
        timeout: Command timeout in seconds.
        check_allowed: If True, validate command is in allowlist.
        **kwargs: Additional arguments passed to subprocess.run().

    Returns:
        subprocess.CompletedProcess with command output.

    Raises:
        SubprocessError: If command is not allowed, not found, or times out.

    Example:
        >>> result = safe_run(['scutil', '--get', 'LocalHostName'])
        >>> if result.returncode == 0:
        ...     print(result.stdout)
    """
    if not cmd:
        raise SubprocessError("Empty command", command=cmd)

    base_cmd = cmd[0]
    if "/" in base_cmd:
        base_cmd = Path(base_cmd).name

    if check_allowed and base_cmd not in ALLOWED_SUBPROCESS_COMMANDS:
        raise SubprocessError(
            f"Command not in allowlist: {base_cmd}",
            command=cmd,
            details={"allowed": sorted(ALLOWED_SUBPROCESS_COMMANDS)},
        )

    timeout = timeout or INTERVALS.SUBPROCESS_TIMEOUT_SECONDS
    kwargs.setdefault("capture_output", True)
    kwargs.setdefault("text", True)
    start_time = time.time()

    try:
        result = subprocess.run(cmd, timeout=timeout, **kwargs)  # nosec B603 - allowlisted
    except subprocess.TimeoutExpired as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.warning(f"Command timed out after {duration_ms:.0f}ms: {cmd}")
        raise SubprocessError(
            f"Command timed out after {timeout}s", command=cmd, details={"timeout": timeout}
        ) from e
    except FileNotFoundError as e:
        logger.error(f"Command not found: {cmd[0]}")
        raise SubprocessError(f"Command not found: {cmd[0]}", command=cmd) from e
    except OSError as e:
        logger.error(f"Subprocess error for {cmd}: {e}")
        raise SubprocessError(f"Subprocess error: {e}", command=cmd) from e

    duration_ms = (time.time() - start_time) * 1000
    log_subprocess_call(
        logger, cmd, result.returncode, duration_ms, success=(result.returncode == 0)
    )
    return result


def run_for_output(cmd: List[str], timeout: Optional[float] = None) -> Optional[str]:
    """Run a command and return its trimmed stdout, or None on any failure.

    A non-zero exit code, empty output, or a SubprocessError all count as
    "no value".

    Example:
        >>> run_for_output(['scutil', '--get', 'ComputerName'])
        'Office iMac'
    """
    try:
        result = safe_run(cmd, timeout=timeout)
    except SubprocessError as e:
        logger.debug(f"Command failed: {cmd[0]} - {e}")
        return None

    if result.returncode != 0:
        return None

    output = (result.stdout or "").strip()
    return output or None
