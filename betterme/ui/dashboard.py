"""Streamlit dashboard showing today's score, trends, and warnings."""
import logging
from pathlib import Path

import streamlit as st

# Allow running via "streamlit run betterme/ui/dashboard.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from betterme.core.config import DashboardSettings
from betterme.core.logging import configure_logging
from betterme.core.models import DashboardResult
from betterme.ingestion.fetch import SheetFetchError
from betterme.processing.pipeline import load_dashboard
from betterme.reporting.templates import (
    average_label,
    fetch_error_message,
    format_number,
    pillar_chart_data,
    pillar_summary_lines,
    recent_table_rows,
    render_table_html,
    status_message,
    warning_chart_data,
    warning_summary_lines,
)

logger = logging.getLogger(__name__)


def _load_session_result(settings: DashboardSettings) -> DashboardResult | None:
    """Fetch and score the sheet once per session; reload clears the cache."""

    if "result" not in st.session_state:
        with st.spinner("Loading data from Google Sheet…"):
            try:
                st.session_state.result = load_dashboard(settings)
                st.session_state.load_error = None
            except SheetFetchError as exc:
                st.session_state.result = None
                st.session_state.load_error = fetch_error_message(exc)
            except ValueError as exc:
                st.session_state.result = None
                st.session_state.load_error = f"Error: {exc}"
    return st.session_state.result


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def _headline(result: DashboardResult) -> None:
    latest = result.latest
    cols = st.columns(3)
    cols[0].metric("Today's score", format_number(latest.total))
    cols[1].metric("7-day average", average_label(result.latest_average))
    cols[2].metric("Streak (days)", result.streak)


def _today_and_warnings(result: DashboardResult) -> None:
    cols = st.columns(2)
    with cols[0]:
        st.subheader("Pillars today")
        st.markdown("  \n".join(pillar_summary_lines(result.latest)))
    with cols[1]:
        st.subheader(f"Warnings (last {result.warnings.window})")
        st.markdown("  \n".join(warning_summary_lines(result.warnings)))


def _charts(result: DashboardResult, warning_window: int) -> None:
    st.subheader("Score")
    st.line_chart({"Date": list(result.dates), "Score": list(result.totals)}, x="Date")

    st.subheader("Pillars")
    st.line_chart(pillar_chart_data(result.entries[-warning_window:]), x="Date")

    st.subheader("Warning counts")
    st.bar_chart(warning_chart_data(result.warnings))


def main() -> None:
    """Launch the daily score dashboard."""

    configure_logging()
    st.set_page_config(page_title="BetterMe Dashboard", layout="wide")
    st.title("BetterMe Daily Score")

    if st.button("Reload data", type="secondary"):
        st.session_state.pop("result", None)
        st.session_state.pop("load_error", None)
        _rerun_app()

    settings = DashboardSettings.from_env()
    result = _load_session_result(settings)

    if result is None:
        st.error(st.session_state.get("load_error") or "Error: no data loaded.")
        return

    if result.is_empty:
        st.info(status_message(result))
        return

    st.caption(status_message(result))
    if result.dropped_count:
        st.warning(f"Skipped {result.dropped_count} rows without a usable date.")

    _headline(result)
    _today_and_warnings(result)

    st.subheader("Last 7 entries")
    st.markdown(render_table_html(recent_table_rows(result.entries)), unsafe_allow_html=True)

    _charts(result, settings.warning_window)


if __name__ == "__main__":
    main()
