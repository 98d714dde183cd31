"""
Argument classifier — build script or target compile?

Cargo passes ``--target <triple>`` for everything it compiles for the
target and omits it for build scripts and build dependencies, which run
on the host. That single pair decides the mode for the whole invocation.
"""
import logging
from dataclasses import dataclass
from typing import Sequence, Union

logger = logging.getLogger(__name__)

TARGET_FLAG = "--target"


@dataclass(frozen=True)
class BuildScriptMode:
    """No target triple: compile with the snapshot compiler."""


@dataclass(frozen=True)
class TargetCompileMode:
    """Target triple present: compile with the staged compiler."""

    target: str


Mode = Union[BuildScriptMode, TargetCompileMode]


def classify(args: Sequence[str]) -> Mode:
    """
    Derive the invocation mode from the forwarded arguments.

    The first ``--target <value>`` pair wins. *args* is never modified.
    """
    for flag, value in zip(args, args[1:]):
        if flag == TARGET_FLAG:
            return TargetCompileMode(target=value)

    if args and args[-1] == TARGET_FLAG:
        logger.warning(
            "%s given without a value; treating as a build script", TARGET_FLAG
        )
    return BuildScriptMode()
