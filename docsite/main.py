from __future__ import annotations

import sys
from pathlib import Path
from datetime import datetime

from docsite.ui.config_loader import load_config
from docsite.core.search.config import search_config_from


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    now = datetime.now().isoformat(timespec="seconds")
    config = load_config()

    print("Docsite :: runtime check")
    print(f"timestamp: {now}")
    print(f"repo_root: {repo_root}")
    print(f"cwd:       {Path.cwd()}")
    print(f"python:    {sys.version.split()[0]}")
    print(f"config:    {config['status']} ({config.get('config_path')})")
    print(f"db_path:   {config.get('db_path')}")
    if config["status"] == "ERROR":
        print(f"error:     {config['error']}")
        return 1

    search_cfg = search_config_from(config["data"])
    print(f"search:    {search_cfg.backend.value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
