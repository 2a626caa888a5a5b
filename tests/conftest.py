import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'yarr' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.fakes import FakePlatform, FakeStorageOpener


@pytest.fixture(autouse=True)
def _isolate_yarr_env(tmp_path, monkeypatch):
    """Keep developer shells and real config directories out of every test.

    Clears YARR_* variables, points the user config directory at a
    per-test location and runs from an empty working directory so no stray
    yarr.yaml is discovered.
    """
    for key in list(os.environ):
        if key.startswith("YARR_"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("APPDATA", str(home / "AppData"))
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    yield


@pytest.fixture
def user_config_dir(tmp_path) -> Path:
    """A user config directory that does not exist yet."""
    return tmp_path / "userconfig"


@pytest.fixture
def fake_platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def fake_opener() -> FakeStorageOpener:
    return FakeStorageOpener()
