"""Terminal screen clearing.

The clear action is resolved once at startup from the platform identifier
and handed to the shell.
"""

from __future__ import annotations

import subprocess
import sys
from typing import Callable

from pgshell.domain.errors import UnsupportedPlatformError
from pgshell.infrastructure.logging import get_logger

logger = get_logger(__name__)

ClearScreen = Callable[[], None]

_CLEAR_COMMANDS: dict[str, list[str]] = {
    "linux": ["clear"],
    "darwin": ["clear"],
    "win32": ["cmd", "/c", "cls"],
}


def _run_clear(command: list[str]) -> None:
    try:
        subprocess.run(command, check=False)
    except OSError as e:
        logger.debug("Screen clear failed", command=command[0], error=str(e))


def resolve_clear_screen(platform: str | None = None) -> ClearScreen:
    """Return the clear-screen action for a platform.

    Args:
        platform: A ``sys.platform`` value; defaults to the current one.

    Returns:
        A no-argument callable. On unsupported platforms calling it raises
        UnsupportedPlatformError.
    """
    platform = platform or sys.platform
    command = _CLEAR_COMMANDS.get(platform)
    if command is None:
        def unsupported() -> None:
            raise UnsupportedPlatformError(
                f"Your platform '{platform}' is unsupported! Can't clear terminal screen"
            )

        return unsupported

    return lambda: _run_clear(command)
