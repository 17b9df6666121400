from __future__ import annotations
from typing import Dict, Tuple
import streamlit as st
import pandas as pd
from constants import ETA_COL, KPI_CARDS
from data_io import local_now, parse_eta

Window = Tuple[pd.Timestamp, pd.Timestamp]

_END_OFFSET = pd.Timedelta(1, "ns")

def load_windows(now: pd.Timestamp, week_start: int = 6) -> Dict[str, Window]:
    """
    Inclusive [start, end] windows for today, this week and this month.
    `week_start` uses Python weekday numbers (0=Monday ... 6=Sunday).
    """
    day = now.normalize()
    week_begin = day - pd.Timedelta(days=(day.weekday() - week_start) % 7)
    month_begin = day.replace(day=1)
    return {
        "today": (day, day + pd.Timedelta(days=1) - _END_OFFSET),
        "week": (week_begin, week_begin + pd.Timedelta(days=7) - _END_OFFSET),
        "month": (month_begin, month_begin + pd.offsets.MonthBegin(1) - _END_OFFSET),
    }

def compute_load_counts(
    df: pd.DataFrame, now: pd.Timestamp, week_start: int = 6, tz: str | None = None
) -> Dict[str, int]:
    total = int(len(df))
    counts = {"today": 0, "week": 0, "month": 0, "total": total}
    if not total or ETA_COL not in df.columns:
        return counts
    eta = parse_eta(df[ETA_COL], tz)
    for name, (start, end) in load_windows(local_now(now, tz), week_start).items():
        counts[name] = int(eta.between(start, end, inclusive="both").sum())
    return counts

def render_kpis(counts: Dict[str, int]) -> None:
    cols = st.columns(len(KPI_CARDS))
    for col, (key, title) in zip(cols, KPI_CARDS):
        col.metric(title, f"{counts.get(key, 0):,}")
