from __future__ import annotations
from typing import Dict
import pandas as pd
import altair as alt
import streamlit as st

from grouping import labelled_series
from lookups import ejecutivo_name, poe_name, pol_name, status_name

def doughnut_chart(data: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(data)
        .mark_arc(innerRadius=60)
        .encode(
            theta=alt.Theta("value:Q", title="Cargas"),
            color=alt.Color("label:N", title=None),
            tooltip=["label", "value"],
        )
    )

def bar_chart(data: pd.DataFrame, axis_title: str) -> alt.Chart:
    return (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("value:Q", title="Cargas"),
            y=alt.Y("label:N", sort="-x", title=axis_title),
            tooltip=["label", "value"],
        )
    )

def line_chart(data: pd.DataFrame, axis_title: str) -> alt.Chart:
    return (
        alt.Chart(data)
        .mark_line(point=True)
        .encode(
            x=alt.X("label:N", title=axis_title),
            y=alt.Y("value:Q", title="Cargas"),
            tooltip=["label", "value"],
        )
    )

def chart_series(chart_data: Dict[str, Dict[str, int]]) -> Dict[str, pd.DataFrame]:
    return {
        "executive": labelled_series(chart_data.get("executive", {}), ejecutivo_name),
        "client": labelled_series(chart_data.get("client", {})),
        "status": labelled_series(chart_data.get("status", {}), status_name),
        "poe": labelled_series(chart_data.get("poe", {}), poe_name, fmt="POE: {}"),
        "pol": labelled_series(chart_data.get("pol", {}), pol_name, fmt="POL: {}"),
    }

def _show(title: str, data: pd.DataFrame, chart: alt.Chart) -> None:
    st.subheader(title)
    if data.empty:
        st.info("Sin datos para mostrar.")
    else:
        st.altair_chart(chart, use_container_width=True)

def render_charts(chart_data: Dict[str, Dict[str, int]]) -> None:
    series = chart_series(chart_data)

    l, r = st.columns(2)
    with l:
        _show("Cargas por Ejecutivo", series["executive"], doughnut_chart(series["executive"]))
    with r:
        _show("Cargas por Cliente", series["client"], doughnut_chart(series["client"]))

    l2, r2 = st.columns(2)
    with l2:
        _show("Cargas por Preestado", series["status"], bar_chart(series["status"], "Preestado"))
    with r2:
        _show("Cargas por POE", series["poe"], line_chart(series["poe"], "POE"))

    _show("Cargas por POL", series["pol"], bar_chart(series["pol"], "POL"))
