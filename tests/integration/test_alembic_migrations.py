from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

pytestmark = pytest.mark.integration

SERVICE_ROOT = Path(__file__).resolve().parents[2]


def _make_alembic_config(database_url: str) -> Config:
    """Return an Alembic config pointing at the service migrations."""
    cfg = Config(str(SERVICE_ROOT / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.set_main_option("script_location", str(SERVICE_ROOT / "migrations"))
    return cfg


def test_alembic_upgrade_and_downgrade_cycle(tmp_path, monkeypatch):
    """Migrations create the article table and index, and downgrade removes them."""
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    cfg = _make_alembic_config(url)

    command.upgrade(cfg, "head")
    engine = create_engine(url)
    try:
        insp = inspect(engine)
        assert "app_article" in insp.get_table_names()
        cols = {c["name"]: c for c in insp.get_columns("app_article")}
        assert set(cols) == {"id", "title", "url", "is_read", "created_at"}
        assert cols["title"]["nullable"] is False
        indexes = {ix["name"]: ix["column_names"] for ix in insp.get_indexes("app_article")}
        assert indexes["article_created_idx"] == ["created_at"]

        command.downgrade(cfg, "base")
        assert "app_article" not in inspect(engine).get_table_names()

        command.upgrade(cfg, "head")
        assert "app_article" in inspect(engine).get_table_names()
    finally:
        engine.dispose()
