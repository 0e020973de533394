"""
US Shipment Tracker - Streamlit entry point
Run: streamlit run app.py
"""
import logging
from datetime import datetime

import streamlit as st

from shipment_tracker.config import configure_logging
from shipment_tracker.storage.backends import StorageError

# ═══════════════════════════════════════════════════════════════
# PAGE CONFIG (MUST BE FIRST)
# ═══════════════════════════════════════════════════════════════
st.set_page_config(
    page_title="US Shipment Tracker",
    page_icon="📦",
    layout="wide",
)

configure_logging()
logger = logging.getLogger("shipment_tracker.app")

# ═══════════════════════════════════════════════════════════════
# HEADER
# ═══════════════════════════════════════════════════════════════
st.title("📦 US Shipment Tracker")
st.caption("Click a state on the map to filter shipments • Click it again to clear")

# ═══════════════════════════════════════════════════════════════
# DASHBOARD
# ═══════════════════════════════════════════════════════════════
from shipment_tracker.ui.dashboard import render_dashboard

try:
    render_dashboard()
except StorageError as e:
    logger.exception("Shipment storage failed")
    st.error(f"❌ Shipment storage could not be read: {e}")
    st.stop()

# ═══════════════════════════════════════════════════════════════
# FOOTER
# ═══════════════════════════════════════════════════════════════
st.divider()
st.caption(f"Last updated: {datetime.now().strftime('%H:%M:%S')}")
