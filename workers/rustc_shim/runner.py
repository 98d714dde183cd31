"""
Shim runner — top-level orchestration: argv → compiler exit code.

This module ties classification, compiler selection, flag and
environment composition, and the launcher together. ``main`` is the
entry point cargo runs in place of ``rustc``.
"""
import logging
import sys
from typing import List, Mapping, Optional, Sequence

from rustc_shim import FATAL_EXIT_CODE, SHIM_NAME
from rustc_shim.config import ShimConfig, load_config
from rustc_shim.core.classify import classify
from rustc_shim.core.environment import compose_env
from rustc_shim.core.flags import compose_flags
from rustc_shim.core.selector import select_compiler
from rustc_shim.errors import ShimError
from rustc_shim.io.command import ComposedCommand
from rustc_shim.io.launcher import launch

logger = logging.getLogger(__name__)


def compose_command(
    args: Sequence[str],
    config: ShimConfig,
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> ComposedCommand:
    """
    Build the compiler call for one invocation.

    The mode is derived once here and shared by every composer. The
    forwarded *args* are kept as-is; composed flags only go after them.
    """
    mode = classify(args)
    program = select_compiler(mode, config)
    flags = compose_flags(mode, config)
    env = compose_env(mode, config, environ, platform)

    logger.info("mode: %s", mode)
    return ComposedCommand(program=program, args=(*args, *flags), env=env)


def run(args: Sequence[str], config: Optional[ShimConfig] = None) -> int:
    """Compose and launch; returns the compiler's exit code."""
    if config is None:
        config = load_config()
    command = compose_command(args, config)
    logger.info("rustc command: %s", command.render())
    return launch(command)


def log_level(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


# ── CLI ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: exits with the compiler's exit code."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        config = load_config()
        logging.getLogger(SHIM_NAME).setLevel(log_level(config.RUSTC_VERBOSE))
        code = run(args, config)
    except ShimError as e:
        logger.critical("%s", e)
        sys.exit(FATAL_EXIT_CODE)

    sys.exit(code)
