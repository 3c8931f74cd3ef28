"""Tests for database engine setup and initialization."""

from pathlib import Path

from sqlalchemy import inspect, text

from layers_showcase.infrastructure.database.engine import (
    create_db_engine,
    init_database,
    is_memory_url,
)


class TestIsMemoryUrl:
    def test_bare_sqlite(self) -> None:
        assert is_memory_url("sqlite://")

    def test_explicit_memory(self) -> None:
        assert is_memory_url("sqlite:///:memory:")

    def test_file_database(self, tmp_path: Path) -> None:
        assert not is_memory_url(f"sqlite:///{tmp_path / 'x.db'}")


class TestCreateDbEngine:
    def test_wal_mode_enabled_for_files(self, tmp_path: Path) -> None:
        engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"
        engine.dispose()

    def test_foreign_keys_enabled(self, tmp_path: Path) -> None:
        engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
        engine.dispose()

    def test_memory_engine_shares_one_database(self) -> None:
        engine = create_db_engine("sqlite://")
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE scratch (x INTEGER)"))
        with engine.connect() as conn:
            assert conn.execute(text("SELECT count(*) FROM scratch")).scalar() == 0
        engine.dispose()


class TestInitDatabase:
    def test_creates_parent_directory_and_file(self, tmp_path: Path) -> None:
        db_path = tmp_path / ".layers" / "layers.db"
        engine = init_database(f"sqlite:///{db_path}")
        assert db_path.parent.is_dir()
        assert db_path.exists()
        engine.dispose()

    def test_creates_users_table(self) -> None:
        engine = init_database("sqlite://")
        columns = {col["name"] for col in inspect(engine).get_columns("users")}
        assert columns == {"id", "name"}
        engine.dispose()

    def test_idempotent(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'test.db'}"
        init_database(url).dispose()
        engine = init_database(url)
        assert "users" in inspect(engine).get_table_names()
        engine.dispose()
