"""
rustc_shim — compiler-invocation dispatcher for the staged bootstrap.

Passed to cargo as "rustc". Picks the snapshot or staged compiler,
appends stage and configuration flags, then runs it and exits with its
exit code.
"""

__version__ = "0.1.0"
SHIM_NAME = "rustc_shim"

# Exit code for failures of the shim itself (bad configuration, spawn
# failure). Distinct from 1, which is reserved for children that report
# no exit code.
FATAL_EXIT_CODE = 101
