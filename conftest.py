"""
Shared pytest fixtures for filestools tests.

Provides temp directories, a small sample file tree, a settings object and
a throwaway importable package for resource loading.
"""

import os
import subprocess
import sys
import tempfile
import textwrap
from pathlib import Path
from uuid import uuid4

import pytest

PROJECT_ROOT = Path(__file__).parent

# Make the package importable without installation
sys.path.insert(0, str(PROJECT_ROOT))


# -------------------------------------------------------------------------
# Settings Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Returns a real Settings object built with test values, independent of
    the process environment.
    """
    from filestools.config import Settings

    return Settings(
        hash_chunk_size=1024,
        text_encoding="utf-8",
        log_level="DEBUG",
        log_file=None,
        log_json=False,
    )


# -------------------------------------------------------------------------
# Temporary Directory Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def temp_dir():
    """
    Provide a temporary directory for test files.

    Creates a temporary directory that is automatically cleaned up after the test.
    Returns a pathlib.Path object.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tree(temp_dir):
    """
    Provide a small directory tree.

    Layout:
        a.txt
        b.txt
        sub/
            c.txt
            deeper/
                d.txt
    """
    (temp_dir / "a.txt").write_text("alpha", encoding="utf-8")
    (temp_dir / "b.txt").write_text("bravo", encoding="utf-8")
    deeper = temp_dir / "sub" / "deeper"
    deeper.mkdir(parents=True)
    (temp_dir / "sub" / "c.txt").write_text("charlie", encoding="utf-8")
    (deeper / "d.txt").write_text("delta", encoding="utf-8")
    return temp_dir


# -------------------------------------------------------------------------
# Resource Package Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def resource_package(temp_dir, monkeypatch):
    """
    Provide an importable package carrying text resources.

    The package gets a unique name per test so the import cache never
    serves a stale copy. Returns the package name.

    Layout:
        <name>/__init__.py
        <name>/models.py          (defines class ReportBuilder)
        <name>/greeting.txt
        <name>/templates/summary.txt
    """
    name = f"respkg_{uuid4().hex[:8]}"
    package_dir = temp_dir / name
    (package_dir / "templates").mkdir(parents=True)

    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "models.py").write_text(
        textwrap.dedent(
            """
            class ReportBuilder:
                pass
            """
        ),
        encoding="utf-8",
    )
    (package_dir / "greeting.txt").write_text("Привет, мир\n", encoding="utf-8")
    (package_dir / "templates" / "summary.txt").write_text(
        "Summary for {name}\n", encoding="utf-8"
    )

    monkeypatch.syspath_prepend(str(temp_dir))
    yield name

    for module_name in [m for m in sys.modules if m == name or m.startswith(name + ".")]:
        del sys.modules[module_name]


# -------------------------------------------------------------------------
# Subprocess Fixtures
# -------------------------------------------------------------------------

@pytest.fixture
def run_python(temp_dir):
    """
    Provide a runner for snippets in a fresh interpreter.

    Import-time behaviour cannot be observed in this process, where the
    package is already imported. The snippet runs from an empty temp
    directory with the project on PYTHONPATH; extra environment variables
    can be passed. Returns the CompletedProcess.
    """
    def run(code, **env_overrides):
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            [str(PROJECT_ROOT)] + [p for p in [env.get("PYTHONPATH")] if p]
        )
        env.update(env_overrides)
        return subprocess.run(
            [sys.executable, "-c", textwrap.dedent(code)],
            cwd=temp_dir,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )

    return run
