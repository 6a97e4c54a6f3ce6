"""
Session-level glue between Streamlit's `st.session_state` and DisplayState.

Everything here takes the store as a plain mutable mapping so it can be
driven with a dict outside of a Streamlit run.
"""

from typing import MutableMapping

from loguru import logger

from intraday_dashboard.fetch import IntradayFetcher, LoadResult, Success
from intraday_dashboard.state import TOGGLES, DisplayState

STATE_KEY = "display_state"
LOADED_KEY = "data_loaded"
RESULT_KEY = "load_result"


def init_session(store: MutableMapping) -> None:
    if STATE_KEY not in store:
        store[STATE_KEY] = DisplayState()
    if LOADED_KEY not in store:
        store[LOADED_KEY] = False


def get_state(store: MutableMapping) -> DisplayState:
    init_session(store)
    return store[STATE_KEY]


def ensure_loaded(store: MutableMapping, fetcher: IntradayFetcher) -> LoadResult:
    """
    Run the fetch on the first call of a session only. A failed load is not
    retried: the state keeps its empty rows and the page keeps showing the
    loading placeholder.
    """
    init_session(store)
    if store[LOADED_KEY]:
        return store.get(RESULT_KEY)

    store[LOADED_KEY] = True
    result = fetcher.load()
    store[RESULT_KEY] = result
    if isinstance(result, Success):
        store[STATE_KEY] = store[STATE_KEY].with_rows(result.rows)
    return result


def apply_toggle(store: MutableMapping, name: str) -> DisplayState:
    if name not in TOGGLES:
        raise ValueError(f"Unknown toggle: {name}")
    state = TOGGLES[name](get_state(store))
    store[STATE_KEY] = state
    logger.debug("Toggled {} (view: {})", name, state.view)
    return state
