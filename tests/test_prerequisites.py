from pathlib import Path

import pytest

from preflight import prerequisites
from preflight.config import BootstrapConfig
from preflight.errors import UsageError, ValidationError


def test_unset_variable_shows_usage_before_any_check(tmp_path: Path, monkeypatch) -> None:
    """Verify unset variable shows usage before any check behavior."""
    def boom(*_args, **_kwargs):  # pragma: no cover - must not run
        raise AssertionError("filesystem check should not run")

    monkeypatch.setattr(prerequisites, "require", boom)
    cfg = BootstrapConfig(
        program="demo",
        require_dirs="a b",
        variables={"b": str(tmp_path / "ghost" / "dir")},
    )
    with pytest.raises(UsageError) as exc:
        prerequisites.check_prerequisites(cfg)
    assert exc.value.message == ""
    assert not (tmp_path / "ghost").exists()


def test_presence_covers_files_before_directories_are_checked(tmp_path: Path) -> None:
    """Verify presence covers files before directories are checked behavior."""
    cfg = BootstrapConfig(
        program="demo",
        require_dirs=["out"],
        require_files=["cfg"],
        variables={"out": str(tmp_path / "missing" / "out")},
    )
    # The directory would fail validation, but the missing file flag wins.
    with pytest.raises(UsageError):
        prerequisites.check_prerequisites(cfg)


def test_directory_variable_pointing_at_file(tmp_path: Path) -> None:
    """Verify directory variable pointing at file behavior."""
    plain = tmp_path / "exists-as-file"
    plain.write_text("")
    cfg = BootstrapConfig(program="demo", require_dirs="a", variables={"a": str(plain)})
    with pytest.raises(ValidationError) as exc:
        prerequisites.check_prerequisites(cfg)
    assert str(exc.value) == f"Required directory is a file: {plain}"


def test_required_files_and_directories_pass(tmp_path: Path) -> None:
    """Verify required files and directories pass behavior."""
    f = tmp_path / "settings.ini"
    f.write_text("")
    new_dir = tmp_path / "out"
    cfg = BootstrapConfig(
        program="demo",
        require_dirs="out",
        require_files="settings",
        variables={"out": str(new_dir), "settings": str(f)},
    )
    prerequisites.check_prerequisites(cfg)
    assert new_dir.is_dir()


def test_missing_required_file(tmp_path: Path) -> None:
    """Verify missing required file behavior."""
    cfg = BootstrapConfig(
        program="demo",
        require_files="settings",
        variables={"settings": str(tmp_path / "nope.ini")},
    )
    with pytest.raises(ValidationError) as exc:
        prerequisites.check_prerequisites(cfg)
    assert "Required file does not exist" in str(exc.value)


def test_slot_names_resolve(tmp_path: Path) -> None:
    """Verify slot names resolve behavior."""
    cfg = BootstrapConfig(program="demo", log_dir=tmp_path, require_dirs="log_dir")
    prerequisites.check_prerequisites(cfg)
