"""
Shipment Grid - paged table with inline vehicle-type edits and row actions
"""
import streamlit as st

from shipment_tracker.config import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from shipment_tracker.core.form_controller import ShipmentFormController
from shipment_tracker.core.grid_read_model import (
    GRID_COLUMNS,
    changed_cells,
    page_count,
    paginate,
    shipments_frame,
)
from shipment_tracker.core.models import VEHICLE_TYPES
from shipment_tracker.core.repository_view import ShipmentRepositoryView

PENDING_DELETE_KEY = "pending_delete_id"
GRID_VERSION_KEY = "grid_version"


def _column_config():
    config = {
        field: st.column_config.Column(label, disabled=True)
        for field, label in GRID_COLUMNS.items()
        if field != "vehicleType"
    }
    config["id"] = st.column_config.NumberColumn("ID", disabled=True, width="small")
    config["containerQuantity"] = st.column_config.NumberColumn("Containers", disabled=True)
    config["vehicleType"] = st.column_config.SelectboxColumn(
        "Vehicle Type",
        options=VEHICLE_TYPES,
        required=True,
    )
    return config


def render_delete_confirmation(view: ShipmentRepositoryView) -> bool:
    """Returns True when the user confirmed or cancelled."""
    shipment_id = st.session_state.get(PENDING_DELETE_KEY)
    if shipment_id is None:
        return False

    with st.container(border=True):
        st.markdown("#### Confirm Delete")
        st.write(f"Are you sure you want to delete shipment #{shipment_id}? "
                 "This action cannot be undone.")
        col1, col2, _ = st.columns([1, 1, 4])
        with col1:
            if st.button("Cancel", key="cancel_delete"):
                st.session_state[PENDING_DELETE_KEY] = None
                return True
        with col2:
            if st.button("Delete", key="confirm_delete", type="primary"):
                view.delete(shipment_id)
                st.session_state[PENDING_DELETE_KEY] = None
                return True
    return False


def render_shipment_grid(view: ShipmentRepositoryView, form: ShipmentFormController) -> bool:
    """
    Render the filtered shipments.
    Returns True when data or dialog state changed (caller reruns).
    """
    st.session_state.setdefault(GRID_VERSION_KEY, 0)

    frame = shipments_frame(view.filtered)

    col1, col2, col3 = st.columns([1, 1, 2])
    with col1:
        page_size = st.selectbox(
            "Rows per page",
            PAGE_SIZE_OPTIONS,
            index=PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE)
            if DEFAULT_PAGE_SIZE in PAGE_SIZE_OPTIONS else 0,
            key="grid_page_size",
        )
    pages = page_count(len(frame), page_size)
    st.session_state.setdefault("grid_page", 1)
    if st.session_state["grid_page"] > pages:
        st.session_state["grid_page"] = pages
    with col2:
        page = st.number_input("Page", min_value=1, max_value=pages, step=1, key="grid_page")
    with col3:
        st.caption(f"Showing {len(frame)} of {len(view.all)} shipments")

    page_frame = paginate(frame, int(page), page_size)

    if page_frame.empty:
        st.info("No shipments match the current selection")
        return False

    edited = st.data_editor(
        page_frame,
        column_config=_column_config(),
        hide_index=True,
        use_container_width=True,
        num_rows="fixed",
        key=f"shipment_grid_{st.session_state[GRID_VERSION_KEY]}",
    )

    changes = changed_cells(page_frame, edited)
    if changes:
        for shipment_id, field_name, value in changes:
            view.edit_field(shipment_id, field_name, value)
        st.session_state[GRID_VERSION_KEY] += 1
        return True

    # ---- Row actions ----
    ids = page_frame["id"].tolist()
    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        selected_id = st.selectbox(
            "Shipment",
            ids,
            format_func=lambda i: f"#{i}",
            key="grid_action_target",
            label_visibility="collapsed",
        )
    with col2:
        if st.button("✏️ Edit", key="grid_edit", use_container_width=True):
            shipment = next((s for s in view.filtered if s.id == selected_id), None)
            if shipment is not None:
                form.open_for_edit(shipment)
                return True
    with col3:
        if st.button("🗑️ Delete", key="grid_delete", use_container_width=True):
            st.session_state[PENDING_DELETE_KEY] = selected_id
            return True

    return False
