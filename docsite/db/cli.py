from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import yaml

from docsite.core.content_store import ContentStore
from docsite.db.database import init_or_upgrade_db
from docsite.ui.config_loader import load_config


def read_seed_file(path: Path) -> list:
    """Reads a YAML or JSON list of document records."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        records = json.loads(text)
    else:
        records = yaml.safe_load(text)
    if isinstance(records, dict):
        records = records.get("documents", [])
    if not isinstance(records, list):
        raise ValueError(f"Seed file {path} must contain a list of documents")
    return records


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the docsite content database.")
    parser.add_argument("--config", required=True, help="Path to config YAML (dev or prod).")
    parser.add_argument("--seed", help="YAML/JSON file with documents to load.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = load_config(str(Path(args.config).resolve()))
    if config["status"] == "ERROR":
        print(f"ERROR: {config['error']}")
        return 1
    if not config.get("db_path"):
        print("ERROR: paths.db_path is not configured")
        return 1

    db_path = init_or_upgrade_db(Path(config["db_path"]))
    print(f"OK: DB ready at {db_path}")

    if args.seed:
        store = ContentStore(str(db_path))
        count = store.load_documents(read_seed_file(Path(args.seed)))
        print(f"OK: loaded {count} documents")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
