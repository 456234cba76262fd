"""
Notification, badge and action feedback components.
Toasts survive a rerun by being queued in session state and flushed on the next run.
"""

import streamlit as st

from config.constants import BADGE_COLORS, MESSAGES, STATUS_BADGE_TONES
from components.loading import is_loading


# ============================================
# TOASTS
# ============================================
def queue_toast(message: str, success: bool = True):
    """Show a toast after the next rerun (st.toast is lost when the script reruns immediately)."""
    st.session_state.setdefault("pending_toasts", []).append((message, success))


def flush_toasts():
    """Show and clear queued toasts. Called once at the top of every run."""
    for message, success in st.session_state.pop("pending_toasts", []):
        notify(message, success)


def notify(message: str, success: bool = True):
    title = MESSAGES["success_title"] if success else MESSAGES["error_title"]
    st.toast(f"**{title}**: {message}", icon="✅" if success else "⚠️")


# ============================================
# BADGES
# ============================================
def get_badge_color(status: str) -> str:
    tone = STATUS_BADGE_TONES.get(status, "grey")
    return BADGE_COLORS[tone]


def render_status_badge(status: str) -> str:
    """
    Generate HTML for a status badge.

    Args:
        status: Status value as stored (e.g. "chưa bảo trì")

    Returns:
        HTML string for the badge
    """
    color = get_badge_color(status)
    return f"""
    <span style="
        display: inline-flex;
        align-items: center;
        padding: 2px 8px;
        border-radius: 9999px;
        font-size: 0.75rem;
        font-weight: 500;
        background: {color}20;
        color: {color};
    ">{status}</span>
    """


# ============================================
# ACTION BUTTONS
# ============================================
def render_action_button(
    label: str,
    key: str,
    loading_key: str = None,
    button_type: str = "primary",
    disabled: bool = False,
    width: str = 'stretch'
) -> bool:
    """
    Render an action button that disables during loading.

    Returns:
        True if button was clicked and not loading
    """
    is_btn_loading = is_loading(loading_key) if loading_key else False

    if is_btn_loading:
        st.button(
            f"⏳ {label}...",
            key=f"{key}_loading",
            disabled=True,
            width=width
        )
        return False
    return st.button(
        label,
        key=key,
        type=button_type,
        disabled=disabled,
        width=width
    )
