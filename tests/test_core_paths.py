"""Tests for path utilities."""

from customer_tracker.core.paths import ensure_directory, ensure_parent


def test_ensure_directory_creates(tmp_path):
    new_dir = tmp_path / "sub" / "dir"
    ensure_directory(new_dir)
    assert new_dir.exists()


def test_ensure_directory_returns_path(tmp_path):
    result = ensure_directory(tmp_path / "test")
    assert result == tmp_path / "test"


def test_ensure_directory_idempotent(tmp_path):
    d = tmp_path / "existing"
    d.mkdir()
    ensure_directory(d)  # should not raise
    assert d.exists()


def test_ensure_parent_creates_parent_only(tmp_path):
    db_file = tmp_path / "data" / "Customers.db"
    assert ensure_parent(db_file) == db_file
    assert db_file.parent.is_dir()
    assert not db_file.exists()
