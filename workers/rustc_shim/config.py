"""
Shim configuration — one snapshot of the environment per invocation.

The bootstrap exports everything the shim needs as environment
variables. They are read exactly once, here, and passed around as a
``ShimConfig`` so the composers stay pure functions of (mode, config).
"""
import logging
import re
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rustc_shim.errors import ConfigurationInvalid, ConfigurationMissing

logger = logging.getLogger(__name__)

ENABLED = "true"
_STAGE_RE = re.compile(r"^(0|[1-9][0-9]*)$")


class ShimConfig(BaseSettings):
    """Environment exported by the bootstrap for a single compiler call."""

    # Compilers
    RUSTC_SNAPSHOT: Optional[str] = None
    RUSTC_REAL: Optional[str] = None
    RUSTC_SNAPSHOT_LIBDIR: Optional[str] = None

    # Stage being built
    RUSTC_STAGE: Optional[int] = Field(default=None, ge=0)

    # Target compiles
    RUSTC_SYSROOT: Optional[str] = None
    MUSL_ROOT: Optional[str] = None
    RUSTC_FLAGS: Optional[str] = None
    RUSTC_CODEGEN_UNITS: Optional[str] = None

    # Toggles, enabled only by the exact string "true"
    RUSTC_DEBUGINFO: Optional[str] = None
    RUSTC_DEBUG_ASSERTIONS: Optional[str] = None
    RUSTC_RPATH: Optional[str] = None

    # Logging
    RUSTC_VERBOSE: int = Field(default=0, ge=0)

    model_config = SettingsConfigDict(case_sensitive=True)

    @field_validator("RUSTC_STAGE", mode="before")
    @classmethod
    def _plain_stage(cls, value: Any) -> Any:
        """Only plain decimal digits; no signs, separators or leading zeros."""
        if isinstance(value, str) and not _STAGE_RE.match(value):
            raise ValueError(f"expected a stage number, got {value!r}")
        return value

    @field_validator("RUSTC_VERBOSE", mode="before")
    @classmethod
    def _lenient_verbose(cls, value: Any) -> Any:
        """Verbosity only affects logging, so a bad value is never fatal."""
        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError:
                value = -1
        if isinstance(value, int) and value < 0:
            logger.warning("ignoring invalid RUSTC_VERBOSE; using 0")
            return 0
        return value

    @property
    def debuginfo_enabled(self) -> bool:
        return self.RUSTC_DEBUGINFO == ENABLED

    @property
    def debug_assertions_enabled(self) -> bool:
        return self.RUSTC_DEBUG_ASSERTIONS == ENABLED

    @property
    def rpath_enabled(self) -> bool:
        return self.RUSTC_RPATH == ENABLED

    def require(self, key: str) -> Any:
        """Return the value of *key*, raising ConfigurationMissing if unset."""
        value = getattr(self, key)
        if value is None:
            raise ConfigurationMissing(key)
        return value


def load_config() -> ShimConfig:
    """
    Read the shim configuration from the process environment.

    Raises
    ------
    ConfigurationInvalid
        If a variable is set to a value that fails validation, e.g. a
        non-numeric or negative ``RUSTC_STAGE``.
    """
    try:
        return ShimConfig()
    except ValidationError as e:
        err = e.errors()[0]
        key = str(err["loc"][0]) if err.get("loc") else "environment"
        raise ConfigurationInvalid(key, err["msg"]) from e
