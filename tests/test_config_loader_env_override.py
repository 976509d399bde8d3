import os
import pytest
import yaml
from docsite.ui.config_loader import load_config


@pytest.fixture
def clean_env():
    """Ensure environment is clean before and after tests."""
    vars_to_clear = [
        "DOCSITE_CONFIG_FILE",
        "DOCSITE_CONFIG_DIR",
        "DOCSITE_ENV",
        "MEILISEARCH_HOST",
        "MEILISEARCH_KEY",
    ]
    old_values = {}
    for v in vars_to_clear:
        old_values[v] = os.environ.get(v)
        if v in os.environ:
            del os.environ[v]

    yield

    for v, val in old_values.items():
        if val is not None:
            os.environ[v] = val
        elif v in os.environ:
            del os.environ[v]


def test_load_config_defaults(clean_env):
    """Repo config/ is used when nothing overrides it."""
    config = load_config()

    assert config["status"] == "OK"
    assert config["env"] == "DEV"
    assert config["source"].startswith("DEFAULT")
    assert config["data"]["search"]["backend"] == "local"
    # dev.yaml overrides only the backend, general.yaml keeps the rest of search.remote
    assert config["data"]["search"]["remote"]["host"] == "http://127.0.0.1:7700"
    assert config["db_path"].endswith("docsite_dev.db")


def test_config_file_override(clean_env, tmp_path):
    cfg_file = tmp_path / "custom_config.yaml"
    data = {
        "setting": "custom_value",
        "database": {"path": "my_db.sqlite"}  # Relative path
    }
    with open(cfg_file, "w") as f:
        yaml.dump(data, f)

    os.environ["DOCSITE_CONFIG_FILE"] = str(cfg_file)

    config = load_config()

    assert config["status"] == "OK"
    assert config["source"].startswith("ENV_FILE")
    assert config["config_path"] == str(cfg_file)
    assert config["data"]["setting"] == "custom_value"
    # DB path resolved relative to config dir
    assert config["db_path"] == str(tmp_path / "my_db.sqlite")


def test_explicit_file_beats_env(clean_env, tmp_path):
    env_file = tmp_path / "env.yaml"
    env_file.write_text("setting: env")
    arg_file = tmp_path / "arg.yaml"
    arg_file.write_text("setting: arg")
    os.environ["DOCSITE_CONFIG_FILE"] = str(env_file)

    config = load_config(str(arg_file))

    assert config["source"] == "ARG_FILE"
    assert config["data"]["setting"] == "arg"


def test_config_dir_override(clean_env, tmp_path):
    with open(tmp_path / "general.yaml", "w") as f:
        yaml.dump({"general_key": "gen_val", "search": {"backend": "local", "remote": {"host": "http://a"}}}, f)
    prod = tmp_path / "prod.yaml"
    with open(prod, "w") as f:
        yaml.dump({"env_key": "prod_val", "search": {"backend": "remote"}}, f)

    os.environ["DOCSITE_CONFIG_DIR"] = str(tmp_path)
    os.environ["DOCSITE_ENV"] = "PROD"

    config = load_config()

    assert config["status"] == "OK"
    assert config["env"] == "PROD"
    assert config["data"]["general_key"] == "gen_val"
    assert config["data"]["env_key"] == "prod_val"
    assert config["data"]["search"] == {"backend": "remote", "remote": {"host": "http://a"}}
    assert config["config_path"] == str(prod)


def test_missing_config_dir(clean_env, tmp_path):
    os.environ["DOCSITE_CONFIG_DIR"] = str(tmp_path / "nope")

    config = load_config()

    assert config["status"] == "ERROR"
    assert "No config files found" in config["error"]


def test_invalid_config_keeps_data(clean_env, tmp_path):
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("features:\n  search_enabled: 'yes'\n")
    os.environ["DOCSITE_CONFIG_FILE"] = str(cfg_file)

    config = load_config()

    assert config["status"] == "ERROR"
    assert "must be boolean" in config["error"]
    assert config["data"]["features"]["search_enabled"] == "yes"


def test_absolute_db_path_preserved(clean_env, tmp_path):
    cfg_file = tmp_path / "abs_db.yaml"
    abs_db = str(tmp_path / "absolute.db")
    with open(cfg_file, "w") as f:
        yaml.dump({"paths": {"db_path": abs_db}}, f)

    os.environ["DOCSITE_CONFIG_FILE"] = str(cfg_file)

    assert load_config()["db_path"] == abs_db
