import logging
from typing import Any, Callable, List, Optional, Union

from .backends import resolve_backend
from .config import BackendMode, SearchConfig
from .errors import ConfigurationError, SearchError
from .index_client import IndexClient
from .models import SearchableDocument, SearchState

logger = logging.getLogger(__name__)

ConfigSource = Union[SearchConfig, Callable[[], SearchConfig]]


class SearchDispatcher:
    """
    Runs a free-text query against the configured backend and keeps the
    resulting hit list for a view.

    One dispatcher belongs to one UI session. The config source is read on
    every search, so switching backend takes effect on the next call.
    """

    def __init__(
        self,
        store: Any,
        config: ConfigSource,
        client_factory: Callable[..., Any] = IndexClient,
        renderer: Optional[Callable[..., Any]] = None,
    ):
        self.store = store
        self._config = config
        self._client_factory = client_factory
        self._renderer = renderer
        self._query: Optional[str] = None
        self._hits: List[SearchableDocument] = []
        self._error: Optional[str] = None
        self._state = SearchState.IDLE
        self._last_backend: Optional[BackendMode] = None

    @property
    def query(self) -> Optional[str]:
        return self._query

    @property
    def hits(self) -> List[SearchableDocument]:
        return list(self._hits)

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def last_backend(self) -> Optional[BackendMode]:
        return self._last_backend

    def set_query(self, q: Optional[str]):
        # Stored verbatim: whitespace-only queries still search.
        self._query = q
        if not q:
            self.clear()

    def clear(self):
        self._hits.clear()
        self._error = None
        self._state = SearchState.IDLE

    def search(self) -> List[SearchableDocument]:
        self.clear()
        if not self._query:
            return self.hits

        self.dispatch()
        return self.hits

    def dispatch(self):
        """
        Runs the current query on the backend chosen by the config.
        Backend failures leave the hit list empty and set `error`.
        """
        self._state = SearchState.SEARCHED
        try:
            config = self._read_config()
            backend = resolve_backend(config, self.store, self._client_factory)
            self._last_backend = backend.mode
            logger.debug(f"Dispatching query {self._query!r} to {backend.mode.value} backend")
            found = backend.run(self._query)
        except ConfigurationError as e:
            logger.warning(f"Search misconfigured: {e}")
            self._fail(str(e))
            return
        except SearchError as e:
            logger.error(f"Search backend failed: {e}")
            self._fail(str(e))
            return
        except Exception as e:
            logger.exception(f"Unexpected search failure for {self._query!r}")
            self._fail(f"Search failed: {e}")
            return

        self._hits.extend(found)

    def render(self):
        """
        View-facing refresh: re-runs the search and hands the hits to the
        renderer. Never raises.
        """
        self.clear()
        try:
            hits = self.search()
            if self._renderer is None:
                return hits
            return self._renderer(hits, error=self._error)
        except Exception:
            logger.exception("Rendering search results failed")
            return None

    def _read_config(self) -> SearchConfig:
        config = self._config() if callable(self._config) else self._config
        if not isinstance(config, SearchConfig):
            raise ConfigurationError(f"Unusable search configuration: {config!r}")
        return config

    def _fail(self, message: str):
        self._hits.clear()
        self._error = message
