"""Streamlit dashboard for the points series.

Range buttons above a line chart, with the latest value and the change
over the selected range as headline.
"""

import logging

import streamlit as st

from points_dashboard.config import Settings, RANGE_LABELS
from points_dashboard.data import AcquisitionError, CsvFetcher
from points_dashboard.indicators import compute_headline, filter_range
from points_dashboard.models import HeadlineResult, Observation
from points_dashboard.ui.chart import build_figure
from points_dashboard.ui.formatting import headline_texts


logger = logging.getLogger(__name__)

STYLE_COLORS = {"pos": "#22c55e", "neg": "#ef4444"}
RANGE_KEY = "selected_range"


@st.cache_data(ttl=Settings().refresh_seconds, show_spinner=False)
def fetch_series(csv_url: str, request_timeout: float) -> list[Observation]:
    """One load cycle per cache period. Failures are not cached."""
    settings = Settings(csv_url=csv_url, request_timeout=request_timeout)
    with CsvFetcher(settings) as fetcher:
        return fetcher.load_series()


def select_range(code: str) -> None:
    st.session_state[RANGE_KEY] = code


def render_range_buttons(active: str) -> None:
    """One button per range; the active one is highlighted."""
    cols = st.columns(len(RANGE_LABELS))
    for col, (code, label) in zip(cols, RANGE_LABELS.items()):
        with col:
            st.button(
                label,
                key=f"range_{code}",
                type="primary" if code == active else "secondary",
                on_click=select_range,
                args=(code,),
                use_container_width=True,
            )


def render_headline(headline: HeadlineResult, unit: str) -> None:
    """Render latest value, change and timestamp."""
    texts = headline_texts(headline, unit)
    color = STYLE_COLORS[texts["style"]]

    st.markdown(
        f"""
        <div style="padding: 0.5rem 0 1rem 0;">
            <div style="font-size: 2.5rem; font-weight: 700; color: #e9eef5;">
                {texts['last_value']}
            </div>
            <div style="font-size: 1.1rem; color: {color}; font-family: 'SF Mono', 'Consolas', monospace;">
                <span class="{texts['style']}">{texts['change_abs']}</span>
                <span class="{texts['style']}">{texts['change_pct']}</span>
            </div>
            <div style="color: #94a3b8; font-size: 0.8rem; margin-top: 0.25rem;">
                {texts['last_timestamp']}
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Punkte",
        page_icon="",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    st.markdown(
        """
        <style>
            .stApp { background-color: #0b0f14; }
            .stMarkdown, .stText, p, span, label { color: #e9eef5; }
            #MainMenu, footer, header { visibility: hidden; }
        </style>
        """,
        unsafe_allow_html=True,
    )

    settings = Settings()
    try:
        settings.validate()
    except ValueError as e:
        st.error(f"Configuration error: {e}")
        return

    if RANGE_KEY not in st.session_state:
        st.session_state[RANGE_KEY] = settings.default_range

    with st.spinner("Loading..."):
        try:
            series = fetch_series(settings.csv_url, settings.request_timeout)
        except AcquisitionError as e:
            logger.error(f"{e}")
            st.error("Daten nicht verfügbar")
            return

    if not series:
        st.info("Keine Daten vorhanden")
        return

    active = st.session_state[RANGE_KEY]
    points = filter_range(series, active)

    headline = compute_headline(points)
    if headline is not None:
        render_headline(headline, settings.value_unit)

    render_range_buttons(active)
    st.plotly_chart(build_figure(points), use_container_width=True, config={"displayModeBar": False})


if __name__ == "__main__":
    main()
