import streamlit as st
from docsite.ui.state import AppState
from docsite.ui.components import hit_list


def render(app_state: AppState):
    st.title("Search")

    features = app_state.data.get("features", {})
    # Missing flag = search hidden
    if not features.get("search_enabled", False):
        st.warning("Search feature is disabled in configuration.")
        return

    if app_state.config.get("status") == "ERROR":
        st.error(f"Config Error: {app_state.config.get('error')}")
        return

    if "db_init_error" in app_state.config:
        st.error(f"Database Error: {app_state.config['db_init_error']}")
        return

    if not app_state.config.get("db_path"):
        st.warning("Database not configured. Search disabled.")
        return

    dispatcher = app_state.search_dispatcher(renderer=hit_list.render)

    query = st.text_input("Query", placeholder="Search titles, headings, descriptions...", key="search_query")
    dispatcher.set_query(query)

    if not query:
        st.info("Type something to search...")
        return

    # Re-runs on every Streamlit rerun, i.e. every query change
    dispatcher.render()
    if dispatcher.last_backend is not None:
        st.caption(f"Mode: {dispatcher.last_backend.value}")
