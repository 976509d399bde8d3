import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

# "collection" is the legacy driver name of the in-process search.
LOCAL_ALIASES = {"local", "collection"}


class BackendMode(Enum):
    LOCAL = "local"
    REMOTE = "remote"

    @classmethod
    def resolve(cls, value: Any) -> "BackendMode":
        """
        Anything that is not exactly a local alias selects the remote index.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in LOCAL_ALIASES:
            return cls.LOCAL
        return cls.REMOTE


@dataclass
class SearchConfig:
    backend: BackendMode = BackendMode.REMOTE
    host: Optional[str] = None
    key: Optional[str] = None
    index_name: Optional[str] = None
    index_prefix: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        self.backend = BackendMode.resolve(self.backend)


def search_config_from(config_data: Dict[str, Any]) -> SearchConfig:
    """
    Builds a SearchConfig from the `data` section returned by load_config().

    Expected shape:
        search:
          backend: local | remote
          remote:
            host: http://127.0.0.1:7700
            key: masterKey
            index_name: content_documents   # optional
            index_prefix: ""                 # optional
            timeout: 5
    """
    search = config_data.get("search") or {}
    remote = search.get("remote") or {}

    cfg = SearchConfig(
        backend=search.get("backend"),
        host=remote.get("host"),
        key=remote.get("key"),
        index_name=remote.get("index_name"),
        index_prefix=remote.get("index_prefix") or "",
        timeout=float(remote.get("timeout", DEFAULT_TIMEOUT)),
    )
    logger.debug(f"Search config resolved: backend={cfg.backend.value}, host={cfg.host}")
    return cfg
