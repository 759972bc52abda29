"""Tests for the configuration model and loader."""

from pathlib import Path

import pytest

from preflight.config import BootstrapConfig, load_config
from preflight.errors import ValidationError


def test_space_separated_lists_are_split() -> None:
    """Verify space separated lists are split behavior."""
    cfg = BootstrapConfig(program="p", require_dirs="a  b", require_files="", resources="x.conf y.conf")
    assert cfg.require_dirs == ["a", "b"]
    assert cfg.require_files == []
    assert cfg.resources == ["x.conf", "y.conf"]


def test_non_empty_strings_enable_switches() -> None:
    """Verify non empty strings enable switches behavior."""
    cfg = BootstrapConfig(program="p", require_root="anything", enable_log="")
    assert cfg.require_root is True
    assert cfg.enable_log is False


def test_empty_slot_means_unset() -> None:
    """Verify empty slot means unset behavior."""
    cfg = BootstrapConfig(program="p", log_dir="", args_type="")
    assert cfg.log_dir is None
    assert cfg.args_type is None


def test_config_is_frozen() -> None:
    """Verify config is frozen behavior."""
    cfg = BootstrapConfig(program="p")
    with pytest.raises(Exception):
        cfg.flags = "ab"  # type: ignore[misc]


def test_lookup_and_with_variables(tmp_path: Path) -> None:
    """Verify lookup and with variables behavior."""
    cfg = BootstrapConfig(program="p", temp_dir=tmp_path, variables={"out": ""})
    assert cfg.lookup("out") == ""
    assert cfg.lookup("temp_dir") == str(tmp_path)
    assert cfg.lookup("unknown") == ""

    updated = cfg.with_variables({"out": "/srv"})
    assert updated.lookup("out") == "/srv"
    assert cfg.lookup("out") == ""


def test_load_config_precedence(tmp_path: Path) -> None:
    """Verify load config precedence behavior."""
    doc = tmp_path / "job.yaml"
    doc.write_text(
        "usage_text: from-yaml\n"
        "log_dir: /yaml/logs\n"
        "temp_dir: /yaml/tmp\n"
        "require_dirs: out\n"
        "variables:\n  out: /srv/out\n"
    )
    env = {"PREFLIGHT_LOG_DIR": "/env/logs", "PREFLIGHT_TEMP_DIR": "/env/tmp"}

    cfg = load_config(doc, environ=env, temp_dir=Path("/kw/tmp"), program="job", args_type=None)

    assert cfg.usage_text == "from-yaml"
    assert cfg.log_dir == Path("/env/logs")
    assert cfg.temp_dir == Path("/kw/tmp")
    assert cfg.require_dirs == ["out"]
    assert cfg.variables == {"out": "/srv/out"}
    assert cfg.args_type is None


def test_load_config_searches_environment_and_cwd(tmp_path: Path, monkeypatch) -> None:
    """Verify load config searches environment and cwd behavior."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "preflight.yaml").write_text("flags: 'ab:'\n")
    assert load_config(environ={}).flags == "ab:"

    other = tmp_path / "other.yaml"
    other.write_text("flags: x\n")
    assert load_config(environ={"PREFLIGHT_CONFIG": str(other)}).flags == "x"


def test_load_config_without_document(tmp_path: Path, monkeypatch) -> None:
    """Verify load config without document behavior."""
    monkeypatch.chdir(tmp_path)
    cfg = load_config(environ={"PREFLIGHT_REQUIRE_ROOT": "1"}, program="p")
    assert cfg.require_root is True


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    """Verify load config rejects unknown keys behavior."""
    doc = tmp_path / "bad.yaml"
    doc.write_text("nested:\n  thing: 1\n")
    with pytest.raises(ValidationError) as exc:
        load_config(doc, environ={})
    assert str(exc.value).startswith("Invalid configuration")


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify load config rejects non mapping behavior."""
    doc = tmp_path / "list.yaml"
    doc.write_text("- a\n- b\n")
    with pytest.raises(ValidationError):
        load_config(doc, environ={})


def test_load_config_explicit_path_must_exist(tmp_path: Path) -> None:
    """Verify load config explicit path must exist behavior."""
    with pytest.raises(ValidationError) as exc:
        load_config(tmp_path / "missing.yaml", environ={})
    assert "Configuration file does not exist" in str(exc.value)
