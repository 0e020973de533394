"""
US Shipment Tracker

Streamlit dashboard over a locally persisted shipment store:
- storage: key-value backends + the shipment store
- core: state derivation, map read model, form controller
- ui: Streamlit / plotly rendering
"""

__version__ = "0.1.0"
