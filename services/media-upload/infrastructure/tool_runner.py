"""Runs external command-line tools and captures their output."""

import subprocess
from collections.abc import Sequence

from tubely_common.logging import setup_logging

from exceptions import ExternalToolError

logger = setup_logging()


def run_tool(
    command: str,
    args: Sequence[str],
    timeout: float | None = None,
) -> str:
    """
    Runs ``command`` once with ``args`` and returns its standard output.

    Stdin is closed so a tool that prompts fails instead of hanging. Output is
    decoded as UTF-8 with undecodable bytes replaced. There are no retries.

    Raises:
        ExternalToolError: If the command cannot be started, exceeds
            ``timeout`` seconds or exits with a non-zero code. Carries the
            captured standard error.
    """
    cmd = [command, *args]
    try:
        p = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        stderr = e.stderr or ""
        if isinstance(stderr, bytes):
            stderr = stderr.decode(errors="replace")
        logger.error(
            "External tool timed out",
            extra={"command": command, "timeout": timeout},
        )
        raise ExternalToolError(command, stderr=stderr, cause=e) from e
    except OSError as e:
        logger.exception("External tool could not be started", extra={"command": command})
        raise ExternalToolError(command, stderr=str(e), cause=e) from e

    if p.returncode != 0:
        logger.error(
            "External tool failed",
            extra={
                "command": command,
                "returncode": p.returncode,
                "stderr": p.stderr[-2000:],
            },
        )
        raise ExternalToolError(command, stderr=p.stderr, returncode=p.returncode)

    return p.stdout
