import logging
import streamlit as st
from pathlib import Path
from docsite.ui.config_loader import load_config
from docsite.db.database import init_or_upgrade_db
from docsite.core.content_store import ContentStore
from docsite.core.search.config import SearchConfig, search_config_from
from docsite.core.search.dispatcher import SearchDispatcher

logger = logging.getLogger(__name__)


@st.cache_resource
def ensure_db_initialized(db_path_str: str):
    """
    Run DB migrations once per process.
    """
    try:
        init_or_upgrade_db(Path(db_path_str))
        return {"status": "OK"}
    except Exception as e:
        logger.error(f"DB Init Fatal Error: {e}")
        return {"status": "ERROR", "error": str(e)}


class AppState:
    def __init__(self):
        # Config is loaded once per session; "Reload config" on Home clears it
        if "app_config" not in st.session_state:
            st.session_state.app_config = load_config()

        self.config = st.session_state.app_config

        if self.config.get("db_path"):
            db_init_res = ensure_db_initialized(self.config["db_path"])
            if db_init_res["status"] == "ERROR":
                self.config["db_init_error"] = db_init_res["error"]

    @property
    def env(self) -> str:
        return self.config.get("env", "UNKNOWN")

    @property
    def data(self) -> dict:
        return self.config.get("data", {})

    @property
    def db_status(self) -> str:
        if self.config.get("status") == "ERROR":
            return "CONFIG_ERROR"
        if not self.config.get("db_path"):
            return "NOT_CONFIGURED"
        if "db_init_error" in self.config:
            return "ERROR"
        return "OK"

    def search_config(self) -> SearchConfig:
        # Read on every search so a config reload switches backend immediately
        return search_config_from(st.session_state.app_config.get("data", {}))

    def search_dispatcher(self, renderer=None) -> SearchDispatcher:
        """One dispatcher per Streamlit session."""
        if "search_dispatcher" not in st.session_state:
            store = ContentStore(self.config["db_path"])
            st.session_state.search_dispatcher = SearchDispatcher(store, self.search_config, renderer=renderer)
        return st.session_state.search_dispatcher

    def reload_config(self):
        st.session_state.pop("app_config", None)
        st.session_state.pop("search_dispatcher", None)


def init_app_state() -> AppState:
    return AppState()
