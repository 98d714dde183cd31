"""
Flag composer — the arguments appended after the forwarded ones.

Responsibilities:
  - Tag every compile with ``--cfg stage<N>``.
  - For target compiles, add sysroot, linking, musl, extra-flag,
    debug and codegen options from the configuration.
  - Build the rpath linker argument by hand from the target triple.

Order is fixed; the same (mode, config) always yields the same list.
"""
from typing import List, Optional

from rustc_shim.config import ENABLED, ShimConfig
from rustc_shim.core.classify import Mode, TargetCompileMode

APPLE_RPATH = "-Wl,-rpath,@loader_path/../lib"
ORIGIN_RPATH = "-Wl,-rpath,$ORIGIN/../lib"


def stage_flags(stage: int) -> List[str]:
    """Conditional-compilation tag for the stage being built."""
    return ["--cfg", f"stage{stage}"]


def split_extra_flags(raw: str) -> List[str]:
    """Split on single spaces and drop empty tokens. No quoting support."""
    return [token for token in raw.split(" ") if token]


def debug_assertions_value(raw: Optional[str]) -> str:
    """``y`` only for the enabling string, ``n`` for anything else."""
    return "y" if raw == ENABLED else "n"


def platform_rpath_arg(target: str) -> Optional[str]:
    """
    Linker argument that puts ``../lib`` on the runtime search path.

    ``-C rpath`` is not used: it derives the path from the compile-time
    directory layout (something like ``$ORIGIN/deps``), while installed
    artifacts need ``$ORIGIN/../lib``. Windows gets nothing.
    """
    if "apple" in target:
        return APPLE_RPATH
    if "windows" in target:
        return None
    return ORIGIN_RPATH


def target_flags(target: str, config: ShimConfig) -> List[str]:
    """Flags for a target compile, in their fixed order."""
    flags = ["--sysroot", config.require("RUSTC_SYSROOT")]

    # Libraries built here are for intermediate use, so link deps dynamically.
    flags.append("-Cprefer-dynamic")

    if config.MUSL_ROOT is not None:
        flags += ["-L", f"native={config.MUSL_ROOT}/lib"]

    if config.RUSTC_FLAGS is not None:
        flags += split_extra_flags(config.RUSTC_FLAGS)

    if config.debuginfo_enabled:
        flags.append("-g")

    flags += [
        "-C",
        f"debug-assertions={debug_assertions_value(config.RUSTC_DEBUG_ASSERTIONS)}",
    ]

    if config.RUSTC_CODEGEN_UNITS is not None:
        flags += ["-C", f"codegen-units={config.RUSTC_CODEGEN_UNITS}"]

    if config.rpath_enabled:
        rpath = platform_rpath_arg(target)
        if rpath is not None:
            flags += ["-C", f"link-args={rpath}"]

    return flags


def compose_flags(mode: Mode, config: ShimConfig) -> List[str]:
    """
    Build the argument tail for *mode*.

    Raises
    ------
    ConfigurationMissing
        If ``RUSTC_STAGE`` is unset, or ``RUSTC_SYSROOT`` is unset for a
        target compile.
    """
    flags = stage_flags(config.require("RUSTC_STAGE"))
    if isinstance(mode, TargetCompileMode):
        flags += target_flags(mode.target, config)
    return flags
