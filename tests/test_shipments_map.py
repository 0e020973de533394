from shipment_tracker.core.map_read_model import EMPTY_COLOR, map_frame
from shipment_tracker.core.models import FilterMode, ShipmentRecord
from shipment_tracker.ui.shipments_map import build_shipments_map

from tests.helpers import TWO_SHIPMENTS


def _legend_text(fig):
    return fig.layout.annotations[0].text


def test_legend_zero_swatch_matches_empty_states():
    records = [ShipmentRecord.from_dict(s) for s in TWO_SHIPMENTS]
    fig = build_shipments_map(map_frame(records, FilterMode.ORIGIN, None), "Origin")

    legend = _legend_text(fig)
    assert f"color:{EMPTY_COLOR}'>■</span> 0" in legend
    assert "#999999" not in legend
    assert fig.layout.annotations[0].bgcolor != EMPTY_COLOR
