"""
Errors — fatal failures of the dispatcher itself.

A compiler that runs and fails is not an error here: its exit code is
the shim's output channel and is propagated unchanged. Everything below
aborts the invocation before (or instead of) running a compiler.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rustc_shim.io.command import ComposedCommand


class ShimError(Exception):
    """Base class for unrecoverable dispatcher failures."""


class ConfigurationMissing(ShimError):
    """A required environment value for the active mode is unset."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"required environment variable {key} is not set")


class ConfigurationInvalid(ShimError):
    """An environment value is set but cannot be used."""

    def __init__(self, key: str, detail: str):
        self.key = key
        self.detail = detail
        super().__init__(f"invalid value for {key}: {detail}")


class SpawnFailure(ShimError):
    """The compiler process could not be created at all."""

    def __init__(self, command: "ComposedCommand", error: OSError):
        self.command = command
        self.error = error
        super().__init__(f"failed to run {command.render()}: {error}")
