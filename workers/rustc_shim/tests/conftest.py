"""
Shared pytest fixtures for rustc_shim tests.

Every test starts from an environment with none of the shim's variables
set, so the developer's shell cannot leak into ``ShimConfig``.

The "compiler" used by launcher and end-to-end tests is the running
Python interpreter with a small recording script: it dumps its argv and
loader search path to JSON and exits with a chosen code.
"""
import json
import logging
import textwrap
from pathlib import Path

import pytest

from rustc_shim import SHIM_NAME
from rustc_shim.config import ShimConfig

RECORD_ENV = "SHIM_TEST_RECORD"
EXIT_ENV = "SHIM_TEST_EXIT"

RECORDING_COMPILER = textwrap.dedent("""\
    import json
    import os
    import sys

    record = {
        "argv": sys.argv[1:],
        "env": {
            k: os.environ.get(k)
            for k in ("LD_LIBRARY_PATH", "DYLD_LIBRARY_PATH", "PATH")
        },
    }
    with open(os.environ["SHIM_TEST_RECORD"], "w") as f:
        json.dump(record, f)
    sys.exit(int(os.environ.get("SHIM_TEST_EXIT", "0")))
""")


@pytest.fixture(autouse=True)
def clean_shim_env(monkeypatch):
    """Unset every variable ShimConfig reads."""
    for key in ShimConfig.model_fields:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv(RECORD_ENV, raising=False)
    monkeypatch.delenv(EXIT_ENV, raising=False)


@pytest.fixture(autouse=True)
def restore_shim_log_level():
    """main() adjusts the package logger level; put it back afterwards."""
    shim_logger = logging.getLogger(SHIM_NAME)
    level = shim_logger.level
    yield
    shim_logger.setLevel(level)


@pytest.fixture
def make_config():
    """Factory for ShimConfig with a stage and both compilers set."""

    def _make(**overrides) -> ShimConfig:
        values = {
            "RUSTC_SNAPSHOT": "/snapshot/bin/rustc",
            "RUSTC_REAL": "/stage1/bin/rustc",
            "RUSTC_STAGE": 1,
        }
        values.update(overrides)
        return ShimConfig(**values)

    return _make


@pytest.fixture
def recording_compiler(tmp_path) -> Path:
    """Script that records how it was invoked (run via sys.executable)."""
    script = tmp_path / "fake_rustc.py"
    script.write_text(RECORDING_COMPILER)
    return script


@pytest.fixture
def record_file(tmp_path, monkeypatch) -> Path:
    """Where the recording compiler writes its JSON record."""
    path = tmp_path / "record.json"
    monkeypatch.setenv(RECORD_ENV, str(path))
    return path


@pytest.fixture
def read_record(record_file):
    """Load what the recording compiler saw on its last run."""

    def _read() -> dict:
        return json.loads(record_file.read_text())

    return _read
