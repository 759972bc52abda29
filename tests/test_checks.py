from pathlib import Path

import pytest

from preflight.checks import ResourceKind, require
from preflight.errors import ValidationError


def test_existing_file_passes_without_mutation(tmp_path: Path) -> None:
    """Verify existing file passes without mutation behavior."""
    f = tmp_path / "a.conf"
    f.write_text("x")
    before = sorted(tmp_path.iterdir())

    assert require("file", f, "Required") == f
    assert sorted(tmp_path.iterdir()) == before


def test_existing_directory_passes(tmp_path: Path) -> None:
    """Verify existing directory passes behavior."""
    assert require(ResourceKind.DIRECTORY, tmp_path, "Required") == tmp_path


def test_file_that_is_a_directory(tmp_path: Path) -> None:
    """Verify file that is a directory behavior."""
    with pytest.raises(ValidationError) as exc:
        require("file", tmp_path, "Input")
    assert str(exc.value) == f"Input file is a directory: {tmp_path}"


def test_missing_file_is_not_created(tmp_path: Path) -> None:
    """Verify missing file is not created behavior."""
    missing = tmp_path / "nope.txt"
    with pytest.raises(ValidationError) as exc:
        require("file", missing, "Resource")
    assert str(exc.value) == f"Resource file does not exist: {missing}"
    assert not missing.exists()


def test_directory_that_is_a_file(tmp_path: Path) -> None:
    """Verify directory that is a file behavior."""
    f = tmp_path / "plain"
    f.write_text("")
    with pytest.raises(ValidationError) as exc:
        require("directory", f, "Required")
    assert str(exc.value) == f"Required directory is a file: {f}"
    assert f.is_file()


def test_directory_created_when_parent_exists(tmp_path: Path) -> None:
    """Verify directory created when parent exists behavior."""
    target = tmp_path / "out"
    require("directory", target, "Core resource")
    assert target.is_dir()

    # Second call is a plain success.
    require("directory", target, "Core resource")
    assert target.is_dir()


def test_directory_with_missing_parent_fails(tmp_path: Path) -> None:
    """Verify directory with missing parent fails behavior."""
    target = tmp_path / "missing" / "out"
    with pytest.raises(ValidationError) as exc:
        require("directory", target, "Required")
    assert str(exc.value) == f"Required directory does not exist: {target}"
    assert not (tmp_path / "missing").exists()


def test_unknown_kind(tmp_path: Path) -> None:
    """Verify unknown kind behavior."""
    with pytest.raises(ValidationError) as exc:
        require("socket", tmp_path, "Input")
    assert str(exc.value) == "Unknown resource type: socket"
    assert exc.value.exit_code == 1
