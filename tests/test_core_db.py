# tests/test_core_db.py

from __future__ import annotations

from pathlib import Path

import pytest

from core import db

from .fakes import FakeDb


def test_database_url_requires_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(RuntimeError):
        db.database_url()


def test_database_url_strips_sslmode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        "DATABASE_URL",
        " postgresql://u:p@localhost:5432/tasks?sslmode=require&application_name=tt ",
    )
    assert db.database_url() == "postgresql://u:p@localhost:5432/tasks?application_name=tt"


def test_pool_must_be_initialized() -> None:
    with pytest.raises(RuntimeError):
        db.pool()


def test_bundled_migrations_create_tasks_table() -> None:
    files = db.migration_files()
    assert [p.name for p in files] == ["001_create_tasks.sql"]
    assert "CREATE TABLE IF NOT EXISTS tasks" in files[0].read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_apply_migrations_runs_files_in_name_order(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    (tmp_path / "002_second.sql").write_text("SELECT 2;", encoding="utf-8")
    (tmp_path / "001_first.sql").write_text("SELECT 1;", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    fake = FakeDb()
    monkeypatch.setattr(db, "execute", fake.execute)

    applied = await db.apply_migrations(tmp_path)

    assert applied == 2
    assert [sql for _, sql, _ in fake.calls] == ["SELECT 1;", "SELECT 2;"]


def test_migration_files_missing_directory(tmp_path: Path) -> None:
    assert db.migration_files(tmp_path / "absent") == []
