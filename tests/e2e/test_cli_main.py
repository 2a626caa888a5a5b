"""End-to-end runs of the ``yarr`` entry point with in-memory collaborators."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from helpers.fakes import FakeStorageOpener
from helpers.io_utils import write_text
from yarr.adapters.platform import DesktopPlatform
from yarr.cli.main import main
from yarr.core.bootstrap import Bootstrapper


@pytest.fixture
def bootstrapper(tmp_path: Path, user_config_dir: Path, fake_platform, fake_opener):
    b = Bootstrapper(
        storage_opener=fake_opener,
        platform=fake_platform,
        environ={},
        search_paths=[tmp_path / "yarr.yaml"],
        user_config_dir=user_config_dir,
        log_stream=io.StringIO(),
    )
    yield b
    if b.log_sink is not None:
        b.log_sink.close()


def test_successful_run_exits_zero(bootstrapper, fake_platform) -> None:
    assert main(["--db", "/tmp/x.db"], bootstrapper=bootstrapper) == 0
    assert len(fake_platform.started) == 1


def test_version_exits_zero(bootstrapper, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"], bootstrapper=bootstrapper)
    assert exc.value.code == 0
    assert capsys.readouterr().out.startswith("v")


def test_error_before_log_sink_goes_to_stderr(tmp_path, bootstrapper, capsys) -> None:
    write_text(tmp_path / "yarr.yaml", "open: [\n")
    assert main([], bootstrapper=bootstrapper) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Failed to parse config file")


def test_error_after_log_sink_goes_to_log(bootstrapper, capsys) -> None:
    assert main(["--db", "/tmp/x.db", "--key-file", "k.pem"], bootstrapper=bootstrapper) == 1
    logged = bootstrapper.log_sink.handler.stream.getvalue()
    assert "CRITICAL yarr: Both cert & key files are required" in logged
    assert capsys.readouterr().err == ""


def test_storage_failure_exits_non_zero(tmp_path, user_config_dir, fake_platform) -> None:
    b = Bootstrapper(
        storage_opener=FakeStorageOpener(error=OSError("unable to open database file")),
        platform=fake_platform,
        environ={},
        search_paths=[tmp_path / "yarr.yaml"],
        user_config_dir=user_config_dir,
        log_stream=io.StringIO(),
    )
    try:
        assert main(["--db", "/nowhere/x.db"], bootstrapper=b) == 1
        assert "/nowhere/x.db" in b.log_sink.handler.stream.getvalue()
    finally:
        b.log_sink.close()
    assert fake_platform.started == []


def test_default_collaborators_reach_storage(tmp_path, monkeypatch) -> None:
    """The stock entry point opens a real SQLite file and then starts serving."""
    started = []
    monkeypatch.setattr(DesktopPlatform, "start", lambda self, handle: started.append(handle))
    db = tmp_path / "real.db"
    log = tmp_path / "yarr.log"
    assert main(["--db", str(db), "--log", str(log)]) == 0
    assert db.exists()
    assert started[0].storage.path == str(db)
    started[0].storage.close()
    # Detach the sink the stock bootstrapper installed.
    for h in list(logging.getLogger("yarr").handlers):
        if getattr(h, "_yarr_sink", False):
            logging.getLogger("yarr").removeHandler(h)
            h.close()
