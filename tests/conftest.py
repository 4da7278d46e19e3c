"""
Pytest configuration and shared fixtures for idlkit tests.
"""

import json
import os
import stat
import sys
from pathlib import Path
from typing import Dict, List

import pytest

from idlkit.config.parser import CompilerConfiguration


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line(
        "markers",
        "subprocess: marks tests that run a real (fake) compiler process",
    )


# ============================================================================
# Fake Compiler
# ============================================================================

# Stand-in for omniidl. It records its command line, then looks at the first
# word of the source file to decide what to do:
#   fail N   -> print "error: syntax" and exit with status N
#   signal   -> kill itself with SIGTERM
#   flood N  -> print N lines of output, then succeed
#   say TEXT -> print TEXT, then succeed
# Anything else writes <stem>.hh into the -C directory and exits 0 silently.
FAKE_COMPILER_SOURCE = """\
import json
import os
import signal
import sys
from pathlib import Path

log = os.environ.get("FAKE_OMNIIDL_LOG")
if log:
    with open(log, "a", encoding="utf-8") as f:
        f.write(json.dumps(sys.argv[1:]) + "\\n")

source = Path(sys.argv[-1])
words = source.read_text().split() if source.is_file() else []
action = words[0] if words else ""

if action == "fail":
    sys.stdout.write("error: syntax\\n")
    sys.exit(int(words[1]))
if action == "signal":
    os.kill(os.getpid(), signal.SIGTERM)
if action == "flood":
    for n in range(int(words[1])):
        sys.stdout.write(f"line {n} of generated chatter\\n")
    sys.exit(0)
if action == "say":
    sys.stderr.write(" ".join(words[1:]))
    sys.exit(0)

output_dir = "."
for arg in sys.argv[1:]:
    if arg.startswith("-C"):
        output_dir = arg[2:]
Path(output_dir, source.stem + ".hh").write_text("// generated\\n")
"""


@pytest.fixture
def fake_compiler(tmp_path) -> Path:
    """Create an executable fake omniidl script."""
    if os.name == "nt":
        pytest.skip("fake compiler script needs a POSIX shebang")

    script = tmp_path / "bin" / "fake-omniidl"
    script.parent.mkdir()
    script.write_text(f"#!{sys.executable}\n{FAKE_COMPILER_SOURCE}")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def compiler_log(tmp_path, monkeypatch):
    """
    Record the fake compiler's command lines.

    Returns a callable giving the recorded argument lists (without argv[0]).
    """
    log_file = tmp_path / "compiler-log.jsonl"
    monkeypatch.setenv("FAKE_OMNIIDL_LOG", str(log_file))

    def read() -> List[List[str]]:
        if not log_file.exists():
            return []
        return [json.loads(line) for line in log_file.read_text().splitlines()]

    return read


# ============================================================================
# Project Fixtures
# ============================================================================


@pytest.fixture
def idl_project(tmp_path) -> Dict[str, Path]:
    """
    Create a small IDL project.

    Layout:
        project/
            echo.idl
            idl/
                a.idl
                b.idl
    """
    root = tmp_path / "project"
    idl_dir = root / "idl"
    idl_dir.mkdir(parents=True)

    echo = root / "echo.idl"
    echo.write_text("interface Echo { string echoString(in string mesg); };\n")
    (idl_dir / "a.idl").write_text("interface A {};\n")
    (idl_dir / "b.idl").write_text("interface B {};\n")

    return {
        "root": root,
        "file": echo,
        "dir": idl_dir,
        "output": root / "build" / "generated",
    }


@pytest.fixture
def make_config(tmp_path):
    """Build a CompilerConfiguration with test-friendly defaults."""

    def make(**overrides) -> CompilerConfiguration:
        values = {
            "inputs": (tmp_path / "echo.idl",),
            "output_directory": tmp_path / "out",
        }
        values.update(overrides)
        return CompilerConfiguration(**values)

    return make
