"""
Environment composer — dynamic-library search path for build scripts.

Build scripts are compiled by the snapshot compiler, which must find
its own shared libraries whatever the ambient environment looks like.
When ``RUSTC_SNAPSHOT_LIBDIR`` is set, it is put in front of the
platform's loader search path. Target compiles get no overrides.
"""
import os
import sys
from typing import Dict, List, Mapping, Optional

from rustc_shim.config import ShimConfig
from rustc_shim.core.classify import BuildScriptMode, Mode
from rustc_shim.errors import ConfigurationInvalid


def _is_windows(platform: str) -> bool:
    return platform.startswith("win") or platform == "cygwin"


def dylib_path_var(platform: Optional[str] = None) -> str:
    """Name of the loader search-path variable on *platform*."""
    platform = platform or sys.platform
    if _is_windows(platform):
        return "PATH"
    if platform == "darwin":
        return "DYLD_LIBRARY_PATH"
    return "LD_LIBRARY_PATH"


def path_separator(platform: Optional[str] = None) -> str:
    platform = platform or sys.platform
    return ";" if platform.startswith("win") else ":"


def dylib_path(
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> List[str]:
    """Current entries of the loader search path, empty entries dropped."""
    environ = os.environ if environ is None else environ
    raw = environ.get(dylib_path_var(platform), "")
    return [p for p in raw.split(path_separator(platform)) if p]


def compose_env(
    mode: Mode,
    config: ShimConfig,
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> Dict[str, str]:
    """
    Environment overrides for the compiler process.

    Returns an empty dict unless this is a build script and
    ``RUSTC_SNAPSHOT_LIBDIR`` is set.
    """
    if not isinstance(mode, BuildScriptMode):
        return {}
    libdir = config.RUSTC_SNAPSHOT_LIBDIR
    if libdir is None:
        return {}

    sep = path_separator(platform)
    if sep in libdir:
        raise ConfigurationInvalid(
            "RUSTC_SNAPSHOT_LIBDIR",
            f"{libdir!r} contains the path separator {sep!r}",
        )

    paths = [libdir] + dylib_path(environ, platform)
    return {dylib_path_var(platform): sep.join(paths)}
