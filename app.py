# app.py - shipment dashboard (KPI cards + charts over active loads)
from __future__ import annotations
import streamlit as st

from api_client import ApiError
from charts import render_charts
from config import get_settings
from constants import APP_TITLE
from data_io import StaleResponse, fetch_latest, get_client, now_local, shipments_frame
from filters import filter_active_records
from grouping import build_chart_data
from kpis import compute_load_counts, render_kpis
from ui import header, notify_error, footer_description


def main() -> None:
    header(APP_TITLE, "Dashboard")
    settings = get_settings()
    client = get_client(settings)

    try:
        records = fetch_latest("dashboard", lambda: client.list_shipments(num_filter=0))
    except ApiError as e:
        notify_error(e)
        st.stop()
    except StaleResponse:
        # a newer run of this page owns the result
        st.stop()

    now = now_local(settings.timezone)
    data = shipments_frame(records, settings.timezone)
    active = filter_active_records(data, now, tz=settings.timezone)

    # KPIs
    render_kpis(compute_load_counts(active, now, settings.week_start_day, tz=settings.timezone))

    # Charts
    st.divider()
    render_charts(build_chart_data(active))

    st.divider()
    footer_description()


if __name__ == "__main__":
    main()
