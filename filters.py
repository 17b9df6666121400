# filters.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable
import streamlit as st
import pandas as pd

from constants import ETA_COL, EXCLUDED_STATUSES, SERVICE_FLAGS, STATUS_COL
from data_io import local_now, parse_eta

@dataclass
class ListFilter:
    num_filter: int
    text_filter: str

# ---------- record filter ----------
def filter_active_records(
    df: pd.DataFrame,
    now: pd.Timestamp,
    excluded: Iterable[int] = EXCLUDED_STATUSES,
    tz: str | None = None,
) -> pd.DataFrame:
    """
    Keep records whose ETA is missing or not yet past, and whose status is not excluded.
    ETAs and `now` are compared as naive local time in `tz`.
    """
    if df.empty:
        return df.copy()

    if ETA_COL in df.columns:
        eta = parse_eta(df[ETA_COL], tz)
        date_ok = eta.isna() | (eta >= local_now(now, tz))
    else:
        date_ok = pd.Series(True, index=df.index)

    if STATUS_COL in df.columns:
        status_ok = ~df[STATUS_COL].isin(list(excluded))
    else:
        status_ok = pd.Series(True, index=df.index)

    return df[date_ok & status_ok].copy()

def filter_by_services(df: pd.DataFrame, services: Iterable[str] | None) -> pd.DataFrame:
    """Narrow quotations to the service categories the viewer may see; None means all."""
    if services is None or df.empty:
        return df
    cols = [s for s in services if s in SERVICE_FLAGS and s in df.columns]
    if not cols:
        return df.iloc[0:0]
    return df[df[cols].any(axis=1)]

# ---------- public UI ----------
def sidebar_list_filter(options: Dict[str, int], key: str) -> ListFilter:
    """numFilter select + free text, as sent to the list endpoints."""
    st.sidebar.header("Filtros")
    labels = list(options)
    choice = st.sidebar.selectbox("Filtrar por", labels, index=0, key=f"{key}_num")
    text = st.sidebar.text_input("Buscar...", value="", key=f"{key}_text")
    return ListFilter(num_filter=options[choice], text_filter=text.strip())
