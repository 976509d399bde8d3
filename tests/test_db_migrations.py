import sqlite3
from pathlib import Path
from docsite.db.database import apply_migrations, connect, init_or_upgrade_db
from docsite.db.cli import main as cli_main

REPO_ROOT = Path(__file__).resolve().parents[1]
MIGRATIONS_DIR = REPO_ROOT / "db" / "migrations"


def test_init_creates_schema(tmp_path):
    db = tmp_path / "nested" / "site.db"
    init_or_upgrade_db(db, MIGRATIONS_DIR)

    assert db.exists()
    with sqlite3.connect(db) as conn:
        tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        cols = {r[1] for r in conn.execute("PRAGMA table_info(content_documents)")}
        versions = [r[0] for r in conn.execute("SELECT version FROM schema_migrations")]

    assert {"content_documents", "schema_migrations"} <= tables
    assert {"slug", "title", "category", "parent", "description", "headings", "params_inline"} <= cols
    assert versions == ["001_create_content_documents"]


def test_migrations_idempotent(tmp_path):
    db = tmp_path / "site.db"
    con = connect(db)
    try:
        assert apply_migrations(con, MIGRATIONS_DIR) == ["001_create_content_documents"]
        assert apply_migrations(con, MIGRATIONS_DIR) == []
    finally:
        con.close()


def test_empty_migrations_dir(tmp_path):
    empty = tmp_path / "none"
    empty.mkdir()
    con = connect(tmp_path / "site.db")
    try:
        assert apply_migrations(con, empty) == []
    finally:
        con.close()


def test_cli_init_and_seed(tmp_path):
    cfg = tmp_path / "site.yaml"
    cfg.write_text("features:\n  search_enabled: true\npaths:\n  db_path: site.db\n")

    rc = cli_main(["--config", str(cfg), "--seed", str(REPO_ROOT / "db" / "seed" / "documents.yaml")])

    assert rc == 0
    with sqlite3.connect(tmp_path / "site.db") as conn:
        count = conn.execute("SELECT COUNT(*) FROM content_documents").fetchone()[0]
    assert count == 3


def test_cli_rejects_invalid_config(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("features:\n  search_enabled: 'yes'\n")

    assert cli_main(["--config", str(cfg)]) == 1
