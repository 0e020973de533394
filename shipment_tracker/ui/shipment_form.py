"""
Shipment Form - add / edit dialog
"""
import streamlit as st

from shipment_tracker.core.form_controller import MissingFieldsError, ShipmentFormController
from shipment_tracker.core.models import VEHICLE_TYPES
from shipment_tracker.core.us_states import ALL_REGIONS

VEHICLE_ICONS = {
    "Truck": "🚚",
    "Ship": "🚢",
    "Airplane": "✈️",
}


FLASH_KEY = "shipment_form_flash"


def _index_of(options, value):
    return options.index(value) if value in options else None


def celebrate_creation(shipment) -> None:
    """Short-lived confirmation after a new shipment is saved."""
    icon = VEHICLE_ICONS.get(shipment.vehicle_type, "📦")
    st.toast(f"{icon} Shipment #{shipment.id} on its way: "
             f"{shipment.origin_state} → {shipment.destination_state}")
    st.balloons()


def show_form_flash() -> None:
    """Render (once) the outcome of the last form submit."""
    flash = st.session_state.pop(FLASH_KEY, None)
    if not flash:
        return
    kind, shipment = flash
    if kind == "created":
        celebrate_creation(shipment)
    elif kind == "updated":
        st.success(f"✅ Shipment #{shipment.id} updated")
    else:
        st.warning("This shipment was removed before the edit could be saved.")


def render_shipment_form(controller: ShipmentFormController) -> bool:
    """
    Render the form while the controller is open.
    Returns True when something was saved or cancelled (caller reruns).
    """
    if not controller.is_open:
        return False

    draft = controller.draft
    form_key = f"shipment_form_{controller.editing_id or 'new'}"

    with st.container(border=True):
        st.markdown(f"### {controller.title}")

        with st.form(form_key):
            col1, col2 = st.columns(2)
            with col1:
                origin = st.selectbox(
                    "Origin State",
                    ALL_REGIONS,
                    index=_index_of(ALL_REGIONS, draft.get("originState")),
                    placeholder="Select a state",
                )
            with col2:
                destination = st.selectbox(
                    "Destination State",
                    ALL_REGIONS,
                    index=_index_of(ALL_REGIONS, draft.get("destinationState")),
                    placeholder="Select a state",
                )

            description = st.text_input("Description", value=draft.get("description", ""))

            col1, col2 = st.columns(2)
            with col1:
                quantity = draft.get("containerQuantity")
                quantity = st.number_input(
                    "Container Quantity",
                    min_value=1,
                    step=1,
                    value=int(quantity) if quantity not in (None, "") else None,
                )
            with col2:
                vehicle = st.selectbox(
                    "Vehicle Type",
                    VEHICLE_TYPES,
                    index=_index_of(VEHICLE_TYPES, draft.get("vehicleType")),
                    placeholder="Select a vehicle",
                )

            col1, col2 = st.columns([1, 1])
            with col1:
                cancelled = st.form_submit_button("Cancel")
            with col2:
                submitted = st.form_submit_button("Save", type="primary")

    if cancelled:
        controller.cancel()
        return True

    if submitted:
        is_new = not controller.is_edit
        try:
            saved = controller.submit({
                "originState": origin,
                "destinationState": destination,
                "description": description,
                "containerQuantity": quantity,
                "vehicleType": vehicle,
            })
        except MissingFieldsError as e:
            st.error(str(e))
            return False

        # Shown on the next run; the caller reruns right away
        if saved is None:
            st.session_state[FLASH_KEY] = ("missing", None)
        elif is_new:
            st.session_state[FLASH_KEY] = ("created", saved)
        else:
            st.session_state[FLASH_KEY] = ("updated", saved)
        return True

    return False
