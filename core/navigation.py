"""
Sidebar navigation and routing for Device Care.
The current route is a slug kept in session state and mirrored in ?page=.
"""
import logging

import streamlit as st

from config.constants import DEFAULT_PAGE, MENU_GROUPS, PAGE_QUERY_PARAM
from core.data import safe_rerun

logger = logging.getLogger("DeviceCare")


def get_menu_items() -> list:
    return [item for items in MENU_GROUPS.values() for item in items]


def get_page_label(slug: str) -> str:
    for item in get_menu_items():
        if item["key"] == slug:
            return item["name"]
    return slug


def resolve_route(requested) -> str:
    """Route for a ?page= value; empty means the dashboard, anything else is kept as-is."""
    if not requested:
        return DEFAULT_PAGE
    return str(requested)


def get_current_page() -> str:
    """Current route, seeded from the query string on first load."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = resolve_route(st.query_params.get(PAGE_QUERY_PARAM))
    return st.session_state.current_page


def navigate_to(slug: str, rerun: bool = True):
    """Switch route, keep ?page= in sync and drop any row selection."""
    st.session_state.current_page = slug
    st.query_params[PAGE_QUERY_PARAM] = slug
    st.session_state.pop("selected_record", None)
    if rerun:
        safe_rerun()


def render_sidebar() -> str:
    """
    Render brand, nav buttons and footer.
    Returns the current page slug after navigation handling.
    """
    st.sidebar.markdown("""
    <div class="sidebar-brand">
        <p>Device Care</p>
    </div>
    """, unsafe_allow_html=True)

    current_page = get_current_page()
    nav_clicked = None

    for group_name, items in MENU_GROUPS.items():
        st.sidebar.markdown(f'<div class="nav-section-header">{group_name}</div>', unsafe_allow_html=True)

        for item in items:
            is_active = current_page == item["key"]
            if st.sidebar.button(
                f"{item['icon']}  {item['name']}",
                key=f"nav_{item['key']}",
                type="primary" if is_active else "secondary",
                width="stretch",
            ):
                nav_clicked = item["key"]

    st.sidebar.markdown("""
    <div class="sidebar-footer">
        <div class="version">Device Care</div>
        <div class="tech">Streamlit + pandas</div>
    </div>
    """, unsafe_allow_html=True)

    if nav_clicked and nav_clicked != current_page:
        logger.info(f"Navigation | FROM={current_page} | TO={nav_clicked}")
        navigate_to(nav_clicked)

    # Keep the URL in sync when the route came from session state
    if st.query_params.get(PAGE_QUERY_PARAM) != current_page:
        st.query_params[PAGE_QUERY_PARAM] = current_page

    return current_page
