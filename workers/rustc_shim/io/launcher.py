"""
Launcher — run the composed command and report its exit code.

The child inherits stdin/stdout/stderr and runs to completion with no
timeout. Its exit code is returned unchanged; a child that reports no
code (killed by a signal) maps to 1.
"""
import logging
import os
import subprocess
from typing import Mapping, Optional

from rustc_shim.errors import SpawnFailure
from rustc_shim.io.command import ComposedCommand

logger = logging.getLogger(__name__)

NO_EXIT_CODE = 1


def child_env(
    command: ComposedCommand,
    base_env: Optional[Mapping[str, str]] = None,
) -> dict:
    """Inherited environment with the command's overrides applied."""
    env = dict(os.environ if base_env is None else base_env)
    env.update(command.env)
    return env


def launch(
    command: ComposedCommand,
    base_env: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Spawn *command*, wait for it and return its exit code.

    Raises
    ------
    SpawnFailure
        If the process cannot be created (missing or non-executable
        binary, ...). Never retried.
    """
    try:
        result = subprocess.run(
            command.argv(),
            env=child_env(command, base_env),
            check=False,
        )
    except OSError as e:
        raise SpawnFailure(command, e) from e

    if result.returncode < 0:
        logger.debug(
            "%s terminated by signal %d", command.program, -result.returncode
        )
        return NO_EXIT_CODE

    logger.debug("%s exited with %d", command.program, result.returncode)
    return result.returncode
