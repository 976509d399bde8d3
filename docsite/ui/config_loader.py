import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from docsite.core.config_validator import ConfigValidator

logger = logging.getLogger(__name__)

# Legacy `scout` keys -> `search` keys
LEGACY_SCOUT_MAP = {
    ("driver",): ("backend",),
    ("prefix",): ("remote", "index_prefix"),
    ("meilisearch", "host"): ("remote", "host"),
    ("meilisearch", "key"): ("remote", "key"),
}

ENV_REMOTE_OVERRIDES = {
    "MEILISEARCH_HOST": "host",
    "MEILISEARCH_KEY": "key",
}


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads configuration from YAML files and environment variables.
    An explicit `config_file` takes precedence over DOCSITE_CONFIG_FILE.
    Returns a dictionary with configuration and status metadata.
    """
    config_status = {
        "status": "OK",
        "error": None,
        "env": get_env(),
        "config_path": None,
        "db_path": None,
        "data": {}
    }

    # --- 1. Read Overrides from ENV ---
    env_override_file = config_file or os.environ.get("DOCSITE_CONFIG_FILE")
    env_override_dir = os.environ.get("DOCSITE_CONFIG_DIR")
    env = config_status["env"]

    # --- 2. Determine Config Directory and Files ---
    if env_override_file:
        config_path = Path(env_override_file)
        config_dir = config_path.parent
        files_to_load = [config_path]
        config_status["config_path"] = str(config_path)
        config_status["source"] = "ARG_FILE" if config_file else "ENV_FILE (DOCSITE_CONFIG_FILE)"
    elif env_override_dir:
        config_dir = Path(env_override_dir)
        files_to_load = [
            config_dir / "general.yaml",
            config_dir / f"{env.lower()}.yaml"
        ]
        config_status["source"] = "ENV_DIR (DOCSITE_CONFIG_DIR)"
    else:
        project_root = Path(__file__).parent.parent.parent
        config_dir = project_root / "config"
        files_to_load = [
            config_dir / "general.yaml",
            config_dir / f"{env.lower()}.yaml"
        ]
        config_status["source"] = "DEFAULT (repo/site-packages)"

    # --- 3. Load Configs ---
    loaded_config = {}
    files_found = 0

    try:
        for file_path in files_to_load:
            if file_path.exists():
                files_found += 1
                if not env_override_file:
                    config_status["config_path"] = str(file_path)

                with open(file_path, "r", encoding="utf-8") as f:
                    _deep_update(loaded_config, yaml.safe_load(f) or {})

        if files_found == 0:
            config_status["status"] = "ERROR"
            config_status["error"] = f"No config files found in {config_dir} (tried: {[str(f) for f in files_to_load]})"
            return config_status

        # --- 3b. Backward Compatibility ---
        _map_legacy_scout(loaded_config)

        # --- 3c. Environment overrides for remote credentials ---
        _apply_env_overrides(loaded_config)

        # --- 3d. Validation ---
        validation_errors = ConfigValidator.validate(loaded_config)
        if validation_errors:
            config_status["status"] = "ERROR"
            config_status["error"] = "Invalid Configuration:\n" + "\n".join(validation_errors)
            # Keep data around for debugging the config
            config_status["data"] = loaded_config
            return config_status

        config_status["data"] = loaded_config

        # --- 4. Resolve DB Path ---
        raw_db_path = None
        if "database" in loaded_config and "path" in loaded_config["database"]:
            raw_db_path = loaded_config["database"]["path"]
        elif "paths" in loaded_config and "db_path" in loaded_config["paths"]:
            raw_db_path = loaded_config["paths"]["db_path"]

        if raw_db_path:
            db_path_obj = Path(raw_db_path)
            if not db_path_obj.is_absolute():
                config_status["db_path"] = str(config_dir / raw_db_path)
            else:
                config_status["db_path"] = str(db_path_obj)

        features = loaded_config.get("features", {})
        search = loaded_config.get("search", {})
        logger.info(f"Config Loaded: search_enabled={features.get('search_enabled')}, backend={search.get('backend')}")

    except Exception as e:
        config_status["status"] = "ERROR"
        config_status["error"] = str(e)

    return config_status


def get_env() -> str:
    """
    Detects the current environment.
    Checks DOCSITE_ENV, defaults to DEV.
    """
    return os.environ.get("DOCSITE_ENV", "DEV").upper()


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]):
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


def _map_legacy_scout(loaded_config: Dict[str, Any]):
    """
    Maps a top-level `scout` section onto `search`.
    Keys already set under `search` win.
    """
    if "scout" not in loaded_config:
        return

    scout = loaded_config.pop("scout") or {}
    search = loaded_config.setdefault("search", {})
    logger.warning("DEPRECATED: Top-level 'scout' found. Mapped to 'search'.")

    for old_path, new_path in LEGACY_SCOUT_MAP.items():
        value = scout
        for part in old_path:
            value = value.get(part) if isinstance(value, dict) else None
        if value is None:
            continue

        section = search
        for part in new_path[:-1]:
            section = section.setdefault(part, {})
        if new_path[-1] in section:
            logger.info(f"Ignoring scout.{'.'.join(old_path)} because search.{'.'.join(new_path)} is set.")
            continue
        section[new_path[-1]] = value


def _apply_env_overrides(loaded_config: Dict[str, Any]):
    for var, key in ENV_REMOTE_OVERRIDES.items():
        value = os.environ.get(var)
        if value:
            remote = loaded_config.setdefault("search", {}).setdefault("remote", {})
            remote[key] = value
            logger.info(f"search.remote.{key} overridden by {var}")
