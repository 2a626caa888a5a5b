from __future__ import annotations

from pathlib import Path

import pytest

from helpers.io_utils import write_yaml
from yarr.core.config import ConfigManager, parse_flags
from yarr.core.exceptions import ConfigParseError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return tmp_path / "conf" / "yarr.yaml"


def _manager(config_file: Path, environ: dict | None = None) -> ConfigManager:
    return ConfigManager(environ=environ or {}, search_paths=[config_file])


def test_defaults_when_no_source_supplies_anything(config_file: Path) -> None:
    cfg = _manager(config_file).resolve({})
    assert cfg.address == "127.0.0.1:7070"
    assert cfg.database == ""
    assert cfg.open_browser is False
    assert cfg.config_file == ""
    assert set(cfg.sources.values()) == {"default"}


def test_flag_beats_env_and_file(config_file: Path) -> None:
    write_yaml(config_file, {"addr": "file:1"})
    cfg = _manager(config_file, {"YARR_ADDR": "env:1"}).resolve({"address": "flag:1"})
    assert cfg.address == "flag:1"
    assert cfg.sources["address"] == "flag"


def test_env_beats_file(config_file: Path) -> None:
    write_yaml(config_file, {"addr": "file:1"})
    cfg = _manager(config_file, {"YARR_ADDR": "env:1"}).resolve({})
    assert cfg.address == "env:1"
    assert cfg.sources["address"] == "env"


def test_file_beats_default(config_file: Path) -> None:
    write_yaml(config_file, {"addr": "file:1", "open": True})
    cfg = _manager(config_file).resolve({})
    assert cfg.address == "file:1"
    assert cfg.open_browser is True
    assert cfg.sources["address"] == "file"
    assert cfg.config_file == str(config_file)


def test_each_option_resolved_independently(config_file: Path) -> None:
    write_yaml(config_file, {"db": "/file.db", "log": "/file.log", "base": "file"})
    cfg = _manager(config_file, {"YARR_LOG": "/env.log"}).resolve({"base_path": "flag"})
    assert (cfg.database, cfg.log_path, cfg.base_path) == ("/file.db", "/env.log", "flag")
    assert cfg.sources["database"] == "file"
    assert cfg.sources["log_path"] == "env"
    assert cfg.sources["base_path"] == "flag"


def test_empty_string_is_a_supplied_value(config_file: Path) -> None:
    write_yaml(config_file, {"base": "from-file"})
    cfg = _manager(config_file, {"YARR_BASE": ""}).resolve({})
    assert cfg.base_path == ""
    assert cfg.sources["base_path"] == "env"


def test_empty_flag_beats_env(config_file: Path) -> None:
    cfg = _manager(config_file, {"YARR_DB": "/env.db"}).resolve({"database": ""})
    assert cfg.database == ""
    assert cfg.sources["database"] == "flag"


def test_field_style_env_alias(config_file: Path) -> None:
    env = {"YARR_DATABASE": "/alias.db", "YARR_CERTFILE": "c.pem", "YARR_OPENBROWSER": "true"}
    cfg = _manager(config_file, env).resolve({})
    assert cfg.database == "/alias.db"
    assert cfg.cert_file == "c.pem"
    assert cfg.open_browser is True


def test_flag_mirroring_env_name_wins_over_alias(config_file: Path) -> None:
    env = {"YARR_DB": "/primary.db", "YARR_DATABASE": "/alias.db"}
    assert _manager(config_file, env).resolve({}).database == "/primary.db"


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), ("yes", True), ("on", True), ("0", False), ("false", False), ("", False)],
)
def test_env_boolean_coercion(config_file: Path, raw: str, expected: bool) -> None:
    assert _manager(config_file, {"YARR_OPEN": raw}).resolve({}).open_browser is expected


def test_env_invalid_boolean_names_the_variable(config_file: Path) -> None:
    with pytest.raises(ConfigParseError) as exc:
        _manager(config_file, {"YARR_OPEN": "maybe"}).resolve({})
    assert "YARR_OPEN" in str(exc.value)
    assert exc.value.context["source"] == "YARR_OPEN"


def test_flag_false_beats_env_and_file_true(config_file: Path) -> None:
    write_yaml(config_file, {"open": True})
    cfg = _manager(config_file, {"YARR_OPEN": "true"}).resolve(parse_flags(["--open=false"]))
    assert cfg.open_browser is False
    assert cfg.sources["open_browser"] == "flag"


@pytest.mark.parametrize("argv, expected", [(["--open"], True), (["--open", "yes"], True), (["-open=0"], False)])
def test_open_flag_values(config_file: Path, argv: list, expected: bool) -> None:
    assert _manager(config_file).resolve(parse_flags(argv)).open_browser is expected


def test_flag_invalid_boolean_names_the_flag(config_file: Path) -> None:
    with pytest.raises(ConfigParseError) as exc:
        _manager(config_file).resolve(parse_flags(["--open=maybe"]))
    assert exc.value.context["source"] == "--open"


def test_unprefixed_env_is_ignored(config_file: Path) -> None:
    cfg = _manager(config_file, {"ADDR": "nope:1", "DB": "/nope.db"}).resolve({})
    assert cfg.address == "127.0.0.1:7070"
    assert cfg.database == ""


def test_uses_process_environment_by_default(config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YARR_ADDR", "0.0.0.0:1234")
    cfg = ConfigManager(search_paths=[config_file]).resolve({})
    assert cfg.address == "0.0.0.0:1234"
