import plotly.graph_objects as go

# passed to st.plotly_chart(config=...)
CHART_CONFIG = {
    "displaylogo": False,
    "modeBarButtonsToRemove": ["zoom2d", "zoomIn2d", "zoomOut2d", "autoScale2d"],
}


def build_candlestick_figure(points, dark_mode: bool = False, height: int = 350) -> go.Figure:
    """Candlestick of (x, [open, high, low, close]) points, themed for light or dark pages."""
    fig = go.Figure()
    fig.add_trace(go.Candlestick(
        x=[p.x for p in points],
        open=[p.y[0] for p in points],
        high=[p.y[1] for p in points],
        low=[p.y[2] for p in points],
        close=[p.y[3] for p in points],
        name="Price",
    ))
    fig.update_layout(
        template="plotly_dark" if dark_mode else "plotly_white",
        height=height,
        xaxis_rangeslider_visible=False,
        hovermode="x unified",
        margin=dict(l=10, r=10, t=10, b=10),
    )
    fig.update_xaxes(type="date")
    return fig
