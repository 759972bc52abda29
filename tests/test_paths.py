from pathlib import Path

from preflight.utils.paths import realpath, upsearch


def test_upsearch_finds_nearest_ancestor(tmp_path: Path) -> None:
    """Verify upsearch finds nearest ancestor behavior."""
    (tmp_path / ".marker").write_text("")
    deep = tmp_path / "a" / "b"
    deep.mkdir(parents=True)
    assert upsearch(".marker", deep) == tmp_path.resolve() / ".marker"


def test_upsearch_prefers_start_directory(tmp_path: Path) -> None:
    """Verify upsearch prefers start directory behavior."""
    (tmp_path / "cfg").mkdir()
    inner = tmp_path / "inner"
    (inner / "cfg").mkdir(parents=True)
    assert upsearch("cfg", inner) == inner.resolve() / "cfg"


def test_upsearch_uses_working_directory(tmp_path: Path, monkeypatch) -> None:
    """Verify upsearch uses working directory behavior."""
    (tmp_path / "flag").write_text("")
    sub = tmp_path / "sub"
    sub.mkdir()
    monkeypatch.chdir(sub)
    assert upsearch("flag") is not None


def test_upsearch_missing(tmp_path: Path) -> None:
    """Verify upsearch missing behavior."""
    assert upsearch("definitely-not-here-9f1c", tmp_path) is None


def test_realpath() -> None:
    """Verify realpath behavior."""
    assert realpath("/etc/hosts", cwd="/home/me") == "/etc/hosts"
    assert realpath("./notes.txt", cwd="/home/me") == "/home/me/notes.txt"
    assert realpath("docs/a.md", cwd="/home/me") == "/home/me/docs/a.md"
