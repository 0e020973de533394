"""
Shipment Dashboard - table + map + add/edit form

All data changes go through ShipmentRepositoryView; this module only wires
Streamlit widgets and session state to it.
"""
import logging
import uuid

import streamlit as st

from shipment_tracker.config import DATA_DIR, STORAGE_KEY
from shipment_tracker.core.form_controller import ShipmentFormController
from shipment_tracker.core.map_read_model import map_frame, state_from_selection
from shipment_tracker.core.models import FilterMode
from shipment_tracker.core.repository_view import ShipmentRepositoryView
from shipment_tracker.core.us_states import US_STATES
from shipment_tracker.storage.backends import StorageBackend, open_backend
from shipment_tracker.storage.shipment_store import ShipmentStore
from shipment_tracker.ui.shipment_form import render_shipment_form, show_form_flash
from shipment_tracker.ui.shipment_grid import render_delete_confirmation, render_shipment_grid
from shipment_tracker.ui.shipments_map import build_shipments_map

logger = logging.getLogger(__name__)

VIEW_KEY = "shipment_view"
FORM_KEY = "shipment_form"
MAP_KEY = "shipments_map_key"

MODE_LABELS = {
    FilterMode.ORIGIN.value: "Origin States",
    FilterMode.DESTINATION.value: "Destination States",
}
ALL_STATES_OPTION = "← All States"


# ═══════════════════════════════════════════════════════════════
# SESSION WIRING
# ═══════════════════════════════════════════════════════════════
@st.cache_resource
def get_backend() -> StorageBackend:
    """One storage backend per server process."""
    logger.info(f"Opening shipment storage in {DATA_DIR}")
    return open_backend(DATA_DIR)


def get_fresh_map_key() -> str:
    """New widget key so the chart drops its previous click selection."""
    return f"map_{uuid.uuid4().hex[:12]}"


def init_session():
    if VIEW_KEY not in st.session_state:
        store = ShipmentStore(get_backend(), key=STORAGE_KEY)
        view = ShipmentRepositoryView(store)
        view.load()
        st.session_state[VIEW_KEY] = view
        st.session_state[FORM_KEY] = ShipmentFormController(view)
        st.session_state[MAP_KEY] = get_fresh_map_key()
    return st.session_state[VIEW_KEY], st.session_state[FORM_KEY]


def _on_mode_change():
    view = st.session_state[VIEW_KEY]
    view.set_mode(st.session_state["map_mode"])
    st.session_state[MAP_KEY] = get_fresh_map_key()


def _on_state_pick():
    view = st.session_state[VIEW_KEY]
    choice = st.session_state["state_picker"]
    if choice == ALL_STATES_OPTION:
        if view.selected_state is not None:
            view.select_state(view.selected_state)
    elif choice != view.selected_state:
        view.select_state(choice)
    st.session_state[MAP_KEY] = get_fresh_map_key()


# ═══════════════════════════════════════════════════════════════
# SECTIONS
# ═══════════════════════════════════════════════════════════════
def render_table_section(view: ShipmentRepositoryView, form: ShipmentFormController):
    st.markdown("## 📋 Shipment Data")

    if view.selected_state:
        axis = "origin" if view.mode == FilterMode.ORIGIN else "destination"
        st.caption(f"Filtered by {axis} state: **{view.selected_state}**")

    if st.button("➕ Add Shipment", type="primary"):
        form.open_for_add(view.draft_for_new())
        st.rerun()

    if render_shipment_form(form):
        st.rerun()

    if render_delete_confirmation(view):
        st.rerun()

    if render_shipment_grid(view, form):
        st.rerun()


def render_map_section(view: ShipmentRepositoryView):
    st.markdown("## 🗺️ Shipment Map")

    st.radio(
        "Map mode",
        options=list(MODE_LABELS),
        index=list(MODE_LABELS).index(view.mode.value),
        format_func=MODE_LABELS.get,
        horizontal=True,
        key="map_mode",
        on_change=_on_mode_change,
        label_visibility="collapsed",
    )

    frame = map_frame(view.all, view.mode, view.selected_state)
    fig = build_shipments_map(frame, mode_label=view.mode.value.title())

    event = st.plotly_chart(
        fig,
        use_container_width=True,
        on_select="rerun",
        selection_mode="points",
        key=st.session_state[MAP_KEY],
    )

    clicked = state_from_selection(event, frame)
    if clicked:
        view.select_state(clicked)
        st.session_state[MAP_KEY] = get_fresh_map_key()
        st.rerun()

    options = [ALL_STATES_OPTION] + US_STATES
    st.session_state["state_picker"] = view.selected_state or ALL_STATES_OPTION
    st.selectbox(
        "Select a state",
        options,
        key="state_picker",
        on_change=_on_state_pick,
    )


# ═══════════════════════════════════════════════════════════════
# ENTRY
# ═══════════════════════════════════════════════════════════════
def render_dashboard():
    view, form = init_session()

    show_form_flash()

    table_col, map_col = st.columns([3, 2])
    with map_col:
        render_map_section(view)
    with table_col:
        render_table_section(view, form)
