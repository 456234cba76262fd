"""
Device Care
A Streamlit web application for tracking devices, maintenance, inventory
checks, warranties, repairs, invoices and repair history.
Data lives in an in-memory store seeded per browser session.
"""

import os
import logging

import streamlit as st

from config.settings import DEBUG, ENVIRONMENT, LOG_DIR
from config.styles import get_dashboard_css
from core.errors import safe_execute
from core.data import init_data_store, get_views
from core.navigation import get_page_label, render_sidebar
from components.confirmation import init_action_confirmation
from components.feedback import flush_toasts
from views import PAGE_REGISTRY
from views.context import AppContext
from views.not_found import render as render_not_found

# ============================================
# LOGGING
# ============================================
# Technical errors go to file, not UI
os.makedirs(LOG_DIR, exist_ok=True)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
    handlers=[
        logging.FileHandler(os.path.join(LOG_DIR, "app.log"), encoding='utf-8'),
        logging.StreamHandler() if DEBUG else logging.NullHandler()
    ]
)
logger = logging.getLogger("DeviceCare")

# Page configuration
st.set_page_config(
    page_title="Device Care",
    page_icon="🛠",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown(get_dashboard_css(), unsafe_allow_html=True)

# ============================================
# SESSION STATE
# ============================================
if "data_store" not in st.session_state:
    logger.info(f"Session started | ENV={ENVIRONMENT}")

store = init_data_store()
init_action_confirmation()

# Toasts queued by the previous run (e.g. a save that closed its dialog)
flush_toasts()

# ============================================
# PAGE DISPATCH
# ============================================
page = render_sidebar()

ctx = AppContext(
    store=store,
    views=get_views(),
    page=page,
)

page_renderer = PAGE_REGISTRY.get(page, render_not_found)
safe_execute(page_renderer, context=f"Rendering {get_page_label(page)}")(ctx)
