from pathlib import Path


def test_repo_layout_has_entry_points():
    repo_root = Path(__file__).resolve().parents[1]
    assert (repo_root / "docsite" / "main.py").exists()
    assert (repo_root / "docsite" / "run_streamlit.py").exists()
    assert (repo_root / "db" / "migrations").is_dir()


def test_runtime_check_runs(capsys, monkeypatch):
    for var in ("DOCSITE_CONFIG_FILE", "DOCSITE_CONFIG_DIR", "DOCSITE_ENV"):
        monkeypatch.delenv(var, raising=False)
    from docsite.main import main

    assert main() == 0
    out = capsys.readouterr().out
    assert "search:    local" in out
