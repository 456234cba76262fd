"""
Loading state helpers.
Busy flags live in session state so buttons can disable themselves while an
operation runs.
"""

import time
from contextlib import contextmanager

import streamlit as st

from config.constants import FORM_LABELS
from config.settings import SIMULATED_LATENCY_SECONDS


def set_loading(key: str, is_loading: bool):
    """Set loading state for a specific operation."""
    st.session_state[f"loading_{key}"] = is_loading


def is_loading(key: str) -> bool:
    """Check if an operation is currently loading."""
    return st.session_state.get(f"loading_{key}", False)


@contextmanager
def busy(key: str, message: str = None, delay: float = None):
    """
    Spinner plus loading flag around an operation.
    With delay set, waits that long first to simulate a network round-trip.
    """
    set_loading(key, True)
    try:
        with st.spinner(message or FORM_LABELS["busy"]):
            wait = SIMULATED_LATENCY_SECONDS if delay is None else delay
            if wait > 0:
                time.sleep(wait)
            yield
    finally:
        set_loading(key, False)

