import streamlit as st
from typing import List, Optional
from docsite.core.search.models import SearchableDocument


def render(hits: List[SearchableDocument], error: Optional[str] = None, title: str = "Results"):
    """
    Renders a search hit list.
    Pure render component, no DB access.
    """
    if error:
        st.error(f"Search is unavailable right now: {error}")
        return

    if not hits:
        st.info("No results found.")
        return

    st.caption(f"{title}: {len(hits)}")
    for i, hit in enumerate(hits):
        label = hit.title or hit.slug or "Untitled"
        with st.expander(f"{i + 1}. {label}", expanded=False):
            trail = " / ".join(p for p in (hit.category, hit.parent) if p)
            if trail:
                st.caption(trail)
            if hit.description:
                st.markdown(hit.description)
            if hit.headings:
                st.markdown("\n".join(f"- {h}" for h in hit.headings))
            st.code(hit.slug or "-")
