import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Union

from .config import BackendMode, SearchConfig
from .errors import ConfigurationError
from .models import SearchableDocument

logger = logging.getLogger(__name__)


@dataclass
class LocalBackend:
    """
    In-process substring filter over every document of the store.
    """
    store: Any
    mode = BackendMode.LOCAL

    def run(self, query: str) -> List[SearchableDocument]:
        fields = self.store.searchable_fields()
        return [doc for doc in self.store.list_all() if doc.matches(query, fields)]


@dataclass
class RemoteBackend:
    """
    Query against a named index on the remote search service.
    A new client is built (and closed) per search.
    """
    client_factory: Callable[..., Any]
    config: SearchConfig
    index_name: str
    mode = BackendMode.REMOTE

    def run(self, query: str) -> List[SearchableDocument]:
        with self.client_factory(self.config.host, self.config.key, timeout=self.config.timeout) as client:
            raw_hits = client.index(self.index_name).search(query)
        return [SearchableDocument.from_record(hit) for hit in raw_hits]


Backend = Union[LocalBackend, RemoteBackend]


def resolve_backend(config: SearchConfig, store: Any, client_factory: Callable[..., Any]) -> Backend:
    """
    Picks the backend variant for one search call.
    Raises ConfigurationError when the remote backend lacks host or key.
    """
    if BackendMode.resolve(config.backend) is BackendMode.LOCAL:
        return LocalBackend(store)

    missing = [name for name in ("host", "key") if not getattr(config, name)]
    if missing:
        raise ConfigurationError(f"Remote search requires search.remote.{' and search.remote.'.join(missing)}")

    index_name = config.index_name or store.remote_index_name(config.index_prefix)
    return RemoteBackend(client_factory, config, index_name)
