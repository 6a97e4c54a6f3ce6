# streamlit_intraday_dashboard.py
"""
Intraday Time Series Dashboard
- Alpha Vantage TIME_SERIES_INTRADAY fetch with a one-shot fallback key
- Plotly candlestick chart or an HTML table of the raw bars
- Dark mode, striped rows and scroll containment toggles kept in session state

Run with:  streamlit run streamlit_intraday_dashboard.py
"""

import streamlit as st

from intraday_dashboard.chart import CHART_CONFIG, build_candlestick_figure
from intraday_dashboard.config import get_settings
from intraday_dashboard.controller import apply_toggle, ensure_loaded, get_state
from intraday_dashboard.fetch import IntradayFetcher
from intraday_dashboard.logging import configure_logging
from intraday_dashboard.table import DEFAULT_COLUMNS, render_table, table_css
from intraday_dashboard.transform import rows_to_frame

st.set_page_config(layout="centered", page_title="Time Series Stock Data")

settings = get_settings()
configure_logging(settings.log_level)

DARK_PAGE_CSS = """
<style>
[data-testid="stAppViewContainer"], [data-testid="stHeader"] { background: #111827; color: #f3f4f6; }
h1, h2, h3, p, label { color: #f3f4f6 !important; }
</style>
"""

# -------------------- Session state & one-time fetch --------------------

ensure_loaded(st.session_state, IntradayFetcher(settings))
state = get_state(st.session_state)

if state.dark_mode:
    st.markdown(DARK_PAGE_CSS, unsafe_allow_html=True)
st.markdown(table_css(state.dark_mode), unsafe_allow_html=True)

# -------------------- Header & toggles --------------------

title_col, mode_col = st.columns([6, 1])
with title_col:
    st.title("Time Series Stock Data")
    st.caption(f"{settings.symbol} · {settings.interval} bars")
with mode_col:
    st.button("☀️" if state.dark_mode else "🌙", key="toggle_dark_mode",
              on_click=apply_toggle, args=(st.session_state, "dark_mode"),
              help="Toggle dark mode")

st.button("Show Table" if state.show_chart else "Show Chart", key="toggle_chart",
          on_click=apply_toggle, args=(st.session_state, "chart"))

# -------------------- Chart or table --------------------

if state.view == "chart":
    fig = build_candlestick_figure(state.chart_points, dark_mode=state.dark_mode,
                                   height=settings.chart_height)
    st.plotly_chart(fig, use_container_width=True, config=CHART_CONFIG)
else:
    b1, b2, _ = st.columns([1, 1, 3])
    b1.button("Toggle Scrollable", key="toggle_scrollable",
              on_click=apply_toggle, args=(st.session_state, "scrollable"))
    b2.button("Toggle Striped", key="toggle_striped",
              on_click=apply_toggle, args=(st.session_state, "striped"))

    if state.view == "table":
        st.markdown(
            render_table(state.rows, DEFAULT_COLUMNS, striped=state.striped,
                         scrollable=state.scrollable, scroll_height=settings.scroll_height),
            unsafe_allow_html=True,
        )
        st.download_button(
            "Download CSV",
            rows_to_frame(state.rows).to_csv(index=False),
            file_name=f"{settings.symbol}_{settings.interval}.csv",
            mime="text/csv",
        )
    else:
        st.write("Loading...")
