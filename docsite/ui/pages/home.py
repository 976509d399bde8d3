import os
import sqlite3
import streamlit as st
from docsite.ui.state import AppState
from docsite.core.content_store import ContentStore
from docsite.core.search.config import BackendMode, search_config_from


def check_store(db_path: str):
    """
    Returns ("OK" | "WARN" | "ERROR", document count or None).
    """
    if not db_path or not os.path.exists(db_path):
        return "WARN", None

    try:
        return "OK", ContentStore(db_path).count()
    except sqlite3.Error:
        return "ERROR", None


def render(app_state: AppState):
    st.title("Docsite")

    st.header("System Status")
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Environment", app_state.env)

    with col2:
        cfg_status = app_state.config.get("status", "UNKNOWN")
        st.metric("Config", cfg_status)
        if cfg_status == "ERROR":
            st.error(f"Config Error: {app_state.config.get('error')}")

    with col3:
        db_path = app_state.config.get("db_path")
        store_status, doc_count = check_store(db_path)
        st.metric("Content store", store_status)
        if store_status == "WARN":
            st.warning("Content store not configured or not found.")
        elif store_status == "ERROR":
            st.error(f"Cannot read content store at {db_path}")
        else:
            st.caption(f"{doc_count} documents")

    with col4:
        if cfg_status == "OK":
            search_cfg = search_config_from(app_state.data)
            st.metric("Search backend", search_cfg.backend.value)
            if search_cfg.backend is BackendMode.REMOTE:
                st.caption(search_cfg.host or "host not set")
        else:
            st.metric("Search backend", "-")

    st.divider()
    st.caption(f"Config source: {app_state.config.get('source', '-')} ({app_state.config.get('config_path')})")
    if st.button("Reload config"):
        app_state.reload_config()
        st.rerun()
