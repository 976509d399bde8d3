from typing import Dict, Any, List
import logging

logger = logging.getLogger(__name__)


class ConfigValidator:
    """
    Validates configuration structure and types.
    """

    @staticmethod
    def validate(config: Dict[str, Any]) -> List[str]:
        errors = []

        # 1. Features (strict bools)
        features = config.get("features", {})
        if not isinstance(features, dict):
            errors.append("'features' must be a dictionary")
        else:
            ConfigValidator._check_bool(features, "search_enabled", errors)

        # 2. Search section
        search = config.get("search", {})
        if not isinstance(search, dict):
            errors.append("'search' must be a dictionary")
        else:
            if "backend" in search and not isinstance(search["backend"], str):
                errors.append(f"Field 'search.backend' must be a string, got {type(search['backend']).__name__}")

            remote = search.get("remote", {})
            if not isinstance(remote, dict):
                errors.append("'search.remote' must be a dictionary")
            else:
                for key in ("host", "key", "index_name", "index_prefix"):
                    if key in remote and remote[key] is not None and not isinstance(remote[key], str):
                        errors.append(f"Field 'search.remote.{key}' must be a string")
                if "timeout" in remote:
                    timeout = remote["timeout"]
                    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                        errors.append("Field 'search.remote.timeout' must be a positive number")

        # 3. Paths
        paths = config.get("paths", {})
        if not isinstance(paths, dict):
            errors.append("'paths' must be a dictionary")
        elif "db_path" in paths and not isinstance(paths["db_path"], str):
            errors.append("'paths.db_path' must be a string")

        if errors:
            logger.error(f"Config Validation Failed: {errors}")
        else:
            logger.info("Config OK: Features=%s", features)

        return errors

    @staticmethod
    def _check_bool(section: dict, key: str, errors: list):
        if key in section and not isinstance(section[key], bool):
            errors.append(f"Field '{key}' must be boolean, got {type(section[key]).__name__}")
