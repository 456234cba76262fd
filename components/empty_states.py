"""
Empty state and all-clear panels.
Shown instead of a table or list when there is nothing to display.
"""

from typing import NamedTuple, Optional

import streamlit as st

from core.navigation import get_page_label, navigate_to


class EmptyState(NamedTuple):
    icon: str
    title: str
    message: str
    tone: str = "neutral"
    # Route offered as a button under the panel
    action_page: Optional[str] = None


EMPTY_STATES = {
    "page_not_found": EmptyState(
        "folder", "Không tìm thấy trang",
        "Trang bạn yêu cầu không tồn tại hoặc đã bị di chuyển.",
        action_page="dashboard",
    ),
    "no_invoice_details": EmptyState(
        "clipboard", "Chưa có chi tiết hóa đơn",
        "Hóa đơn này chưa có hạng mục nào. Thêm hạng mục bên dưới.",
        tone="info",
    ),
    "no_chart_data": EmptyState(
        "box", "Chưa có thiết bị",
        "Chưa có dữ liệu thiết bị để thống kê theo trạng thái.",
        tone="info",
    ),
    "no_data": EmptyState("folder", "Không có dữ liệu", "Không có dữ liệu để hiển thị."),
}

# Feather-style SVG paths, drawn with stroke="currentColor"
ICONS = {
    "box": '<path d="M21 16V8l-9-5-9 5v8l9 5 9-5z"></path><path d="M3 8l9 5 9-5M12 13v8"></path>',
    "check": '<circle cx="12" cy="12" r="10"></circle><path d="M8 12l3 3 5-6"></path>',
    "clipboard": '<rect x="5" y="4" width="14" height="17" rx="2"></rect><rect x="9" y="2" width="6" height="4" rx="1"></rect>',
    "folder": '<path d="M3 6a2 2 0 0 1 2-2h4l2 3h8a2 2 0 0 1 2 2v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"></path>',
}


def _panel_html(css_class: str, icon: str, title: str, message: str) -> str:
    return f"""
    <div class="{css_class}">
        <svg class="empty-state-icon" viewBox="0 0 24 24" fill="none" stroke="currentColor"
             stroke-width="1.5" stroke-linecap="round" stroke-linejoin="round">
            {ICONS.get(icon, ICONS["folder"])}
        </svg>
        <div class="empty-state-title">{title}</div>
        <div class="empty-state-text">{message}</div>
    </div>
    """


def render_empty_state(state_key: str, custom_message: str = None, show_action: bool = True) -> None:
    """
    Render a registered empty state.

    Args:
        state_key: Key in EMPTY_STATES; unknown keys fall back to "no_data"
        custom_message: Replaces the registered message
        show_action: Offer the state's navigation button, if it has one
    """
    state = EMPTY_STATES.get(state_key, EMPTY_STATES["no_data"])
    st.markdown(
        _panel_html(f"empty-state {state.tone}", state.icon, state.title, custom_message or state.message),
        unsafe_allow_html=True,
    )

    if show_action and state.action_page:
        _, center, _ = st.columns([1, 2, 1])
        with center:
            label = f"Về trang {get_page_label(state.action_page).lower()}"
            if st.button(label, key=f"empty_action_{state_key}", width="stretch"):
                navigate_to(state.action_page)


def render_success_state(title: str, message: str, icon: str = "check") -> None:
    """All-clear panel, e.g. when no work is pending."""
    st.markdown(_panel_html("empty-state success", icon, title, message), unsafe_allow_html=True)
