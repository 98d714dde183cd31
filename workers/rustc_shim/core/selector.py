"""
Compiler selector — map the mode to exactly one compiler binary.

Build scripts always use the snapshot compiler, which is guaranteed to
produce an executable. Intermediate staged compilers may not have a
standard library built yet, so they are only used for target compiles.
"""
from rustc_shim.config import ShimConfig
from rustc_shim.core.classify import BuildScriptMode, Mode

SNAPSHOT_KEY = "RUSTC_SNAPSHOT"
REAL_KEY = "RUSTC_REAL"


def compiler_key(mode: Mode) -> str:
    """Name of the environment variable holding the compiler for *mode*."""
    if isinstance(mode, BuildScriptMode):
        return SNAPSHOT_KEY
    return REAL_KEY


def select_compiler(mode: Mode, config: ShimConfig) -> str:
    """Return the compiler path for *mode*; no fallback to the other one."""
    return config.require(compiler_key(mode))
