import plotly.graph_objects as go
import pandas as pd

from shipment_tracker.core.map_read_model import (
    DENSITY_RGB,
    EMPTY_COLOR,
    MAX_OPACITY,
    BASE_OPACITY,
    SELECTED_COLOR,
)


def _discrete_colorscale(colors):
    """One flat band per location so each state gets exactly its own color."""
    n = len(colors)
    scale = []
    for i, color in enumerate(colors):
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])
    return scale


def build_shipments_map(frame: pd.DataFrame, mode_label: str = "Origin") -> go.Figure:
    """
    Renders a Plotly choropleth of US states colored by shipment density.
    `frame` comes from map_read_model.map_frame.
    """
    n = len(frame)

    fig = go.Figure(
        go.Choropleth(
            locations=frame["code"],
            locationmode="USA-states",
            z=[i + 0.5 for i in range(n)],
            zmin=0,
            zmax=max(n, 1),
            colorscale=_discrete_colorscale(list(frame["color"])) if n else None,
            showscale=False,
            customdata=frame[["state"]].to_numpy(),
            text=frame["label"],
            hovertemplate="%{text}<extra></extra>",
            marker_line_color="#CCCCCC",
            marker_line_width=0.75,
        )
    )

    r, g, b = DENSITY_RGB
    legend = (
        "Shipments per State: "
        f"<span style='color:{EMPTY_COLOR}'>■</span> 0 &nbsp; "
        f"<span style='color:rgba({r},{g},{b},{BASE_OPACITY})'>■</span>"
        f"<span style='color:rgba({r},{g},{b},{MAX_OPACITY})'>■</span> More Shipments → &nbsp; "
        f"<span style='color:{SELECTED_COLOR}'>■</span> Selected"
    )

    fig.update_layout(
        title=f"📍 {mode_label} States — Shipment Density",
        geo=dict(scope="usa", projection_type="albers usa", bgcolor="rgba(0,0,0,0)",
                 lakecolor=EMPTY_COLOR),
        margin={"r": 0, "t": 50, "l": 0, "b": 40},
        height=520,
        clickmode="event+select",
        annotations=[
            dict(text=legend, x=0.5, y=-0.05, xref="paper", yref="paper",
                 showarrow=False, font=dict(size=12),
                 bgcolor="#EEEEEE", bordercolor="#CCCCCC", borderwidth=1)
        ],
    )

    return fig
