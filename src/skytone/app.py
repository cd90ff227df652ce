"""SkyTone — Streamlit page showing today's sunset and twilight for the browser's location."""

import streamlit as st
from streamlit_js_eval import streamlit_js_eval

from skytone.i18n import t
from skytone.location import BrowserLocationSource, BrowserPermissionGate
from skytone.log import setup_logging
from skytone.models import DisplayState
from skytone.pipeline import refresh
from skytone.renderers.cards import render_card_html, render_title_html
from skytone.timefmt import zone_at

_CSS = """
<style>
/* Hide streamlit_js_eval invisible iframes */
iframe[src*="streamlit_js_eval"] { display: none !important; }
[data-testid="stElementContainer"]:has(iframe[src*="streamlit_js_eval"]) {
    display: none !important;
}
/* Primary → background vertical gradient */
html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
    background: linear-gradient(to bottom, #6650a4 0%, #fffbfe 100%) !important;
}
[data-testid="stHeader"], [data-testid="stToolbar"] {
    display: none !important;
}
[data-testid="stMainBlockContainer"] {
    max-width: 640px !important;
    padding-top: 12vh !important;
}
.sky-title {
    color: #ffffff;
    text-align: center;
    font-size: 3.5rem !important;
    font-weight: 400;
    margin-bottom: 1rem;
}
.sky-card {
    background: #fffbfe;
    border-radius: 12px;
    box-shadow: 0 4px 12px rgba(0, 0, 0, 0.25);
    padding: 1rem;
    margin: 0.5rem;
    text-align: center;
}
.sky-card-heading {
    color: #6650a4;
    font-size: 1rem;
    font-weight: 500;
}
.sky-card-body {
    color: #1c1b1f;
    font-size: 1rem;
    line-height: 1.6;
}
/* Refresh button */
[data-testid="stButton"] button {
    background-color: #6650a4 !important;
    color: #ffffff !important;
    border: none !important;
    border-radius: 20px !important;
    margin-top: 1rem;
}
</style>
"""


def _render_cards(location_slot, sunset_slot, state: DisplayState, lang: str) -> None:
    location_slot.markdown(
        render_card_html(t("card_location", lang), state.location_text),
        unsafe_allow_html=True,
    )
    sunset_slot.markdown(
        render_card_html(t("card_sunset", lang), state.sunset_text),
        unsafe_allow_html=True,
    )


def main() -> None:
    setup_logging()

    # --- Language detection (browser-first via streamlit-js-eval) ---
    # navigator.language is read once and cached in session_state. Until the
    # JS call returns, labels fall back to English.
    if "lang" not in st.session_state:
        _browser_lang: str | None = streamlit_js_eval(
            js_expressions="navigator.language", key="_lang_detect", height=0
        )
        if _browser_lang is not None:
            st.session_state.lang = (
                "ko" if _browser_lang.lower().startswith("ko") else "en"
            )

    _lang: str = st.session_state.get("lang", "en")

    st.set_page_config(
        page_title=t("page_title", _lang),
        page_icon="🌇",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    # --- Session state initialization ---
    if "display" not in st.session_state:
        st.session_state.display = DisplayState()
    # App start counts as the first refresh request.
    if "refresh_pending" not in st.session_state:
        st.session_state.refresh_pending = True
    if "refresh_seq" not in st.session_state:
        st.session_state.refresh_seq = 0

    st.markdown(_CSS, unsafe_allow_html=True)
    st.markdown(render_title_html(t("page_title", _lang)), unsafe_allow_html=True)

    location_slot = st.empty()
    sunset_slot = st.empty()
    _render_cards(location_slot, sunset_slot, st.session_state.display, _lang)

    _, col, _ = st.columns([1, 1, 1])
    with col:
        if st.button(t("btn_refresh", _lang), key="refresh_btn", use_container_width=True):
            st.session_state.refresh_seq += 1
            st.session_state.refresh_pending = True

    if not st.session_state.refresh_pending:
        return

    # Component keys change per refresh so the browser is asked again.
    # Within one refresh the gate and source st.stop() until their answer
    # arrives; the rerun then replays the cached answers and continues.
    seq = st.session_state.refresh_seq
    gate = BrowserPermissionGate(key=f"_permission_{seq}")
    source = BrowserLocationSource(key=f"_location_{seq}")
    for state in refresh(
        st.session_state.display, gate, source, notify=st.toast, resolve_zone=zone_at
    ):
        st.session_state.display = state
        _render_cards(location_slot, sunset_slot, state, _lang)
    st.session_state.refresh_pending = False
