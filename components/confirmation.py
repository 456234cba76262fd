"""
Two-step confirmation for destructive actions.
Clicking "delete" only records a pending action in session state; the page
then draws the confirmation panel and performs the action on "confirm".
"""

from typing import Optional, Tuple

import streamlit as st

from config.constants import FORM_LABELS


def init_action_confirmation():
    st.session_state.setdefault("pending_action", None)


def request_action_confirmation(action_type: str, entity: str, record_id: str, label: str):
    st.session_state.pending_action = {
        "action_type": action_type,
        "entity": entity,
        "record_id": record_id,
        "label": label,
    }


def get_pending_action(action_type: str = None, entity: str = None) -> Optional[dict]:
    """The pending action, or None when there is none or it is for another type/entity."""
    action = st.session_state.get("pending_action")
    if not action:
        return None
    if action_type and action["action_type"] != action_type:
        return None
    if entity and action["entity"] != entity:
        return None
    return action


def clear_action_confirmation():
    st.session_state.pending_action = None


def render_confirmation_dialog() -> Tuple[bool, bool]:
    """
    Draw the panel for the pending action.
    Returns (confirmed, cancelled); cancelling also clears the pending action.
    """
    action = get_pending_action()
    if action is None:
        return False, False

    body = FORM_LABELS["confirm_delete_body"].format(label=action["label"], record_id=action["record_id"])
    st.markdown(f"""
    <div class="confirm-panel">
        <div class="confirm-panel-title">{FORM_LABELS["confirm_delete_title"]}</div>
        <div class="confirm-panel-body">{body}</div>
    </div>
    """, unsafe_allow_html=True)

    confirm_col, cancel_col, _ = st.columns([1, 1, 2])
    with confirm_col:
        confirmed = st.button(FORM_LABELS["confirm"], key="confirm_action_btn", type="primary", width="stretch")
    with cancel_col:
        cancelled = st.button(FORM_LABELS["cancel"], key="cancel_action_btn", width="stretch")

    if cancelled:
        clear_action_confirmation()
    return confirmed, cancelled
