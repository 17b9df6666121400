# data_io.py
from __future__ import annotations
import logging
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd
import streamlit as st

from api_client import ApiClient
from config import Settings, get_settings
from constants import QUOTATION_COLS, SERVICE_FLAGS, SHIPMENT_DATE_COLS

logger = logging.getLogger(__name__)


def get_client(settings: Optional[Settings] = None) -> ApiClient:
    s = settings or get_settings()
    return ApiClient(s.api_base, token=s.api_token, timeout=s.request_timeout)


def _local_naive(value: Any, tz: str | None) -> pd.Timestamp:
    # Offset-less values are already local; values with an offset move to `tz`.
    if value is None:
        return pd.NaT
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError):
        return pd.NaT
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return pd.NaT
    if ts.tzinfo is not None:
        ts = ts.tz_convert(tz or "UTC").tz_localize(None)
    return ts


def parse_eta(values: pd.Series, tz: str | None = None) -> pd.Series:
    """
    ETA column -> tz-naive local timestamps. Unparseable values become NaT,
    which downstream treats as "no ETA".
    """
    if pd.api.types.is_datetime64_any_dtype(values):
        if values.dt.tz is None:
            return values
        return values.dt.tz_convert(tz or "UTC").dt.tz_localize(None)
    parsed = values.map(lambda v: _local_naive(v, tz))
    return pd.to_datetime(parsed, errors="coerce")


def local_now(now: pd.Timestamp, tz: str | None = None) -> pd.Timestamp:
    return _local_naive(now, tz)


def _normalize_dates(df: pd.DataFrame, cols: Iterable[str], tz: str) -> pd.DataFrame:
    for col in cols:
        if col in df.columns:
            df[col] = parse_eta(df[col], tz)
    return df


def shipments_frame(records: List[Dict[str, Any]], tz: str) -> pd.DataFrame:
    df = pd.DataFrame.from_records(records)
    return _normalize_dates(df, SHIPMENT_DATE_COLS, tz)


def quotations_frame(records: List[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame.from_records(records)
    for col in QUOTATION_COLS:
        if col not in df.columns:
            df[col] = None
    for flag in SERVICE_FLAGS:
        if flag in df.columns:
            df[flag] = df[flag].replace({np.nan: None}).map(bool)
        else:
            df[flag] = False
    return df


def now_local(tz: str) -> pd.Timestamp:
    return pd.Timestamp.now(tz=tz).tz_localize(None)


class StaleResponse(Exception):
    """A newer request for the same view started while this one was in flight."""


class RequestGeneration:
    """
    Hands out increasing request numbers for one view. Only the newest request
    may apply its result; anything that resolves later than a newer request is dropped.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest = 0
        self.value: Any = None

    def begin(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def apply(self, generation: int, value: Any) -> bool:
        with self._lock:
            if generation != self._latest:
                return False
            self.value = value
            return True


def fetch_latest(view_key: str, fetch: Callable[[], Any]) -> Any:
    """
    Run `fetch` under the view's RequestGeneration (kept in session state) and
    return its result. Raises StaleResponse when a newer request superseded it;
    ApiError from `fetch` propagates.
    """
    holder = st.session_state.setdefault(f"_requests_{view_key}", RequestGeneration())
    generation = holder.begin()
    result = fetch()
    if not holder.apply(generation, result):
        logger.info("Discarded stale response for %s (generation %d)", view_key, generation)
        raise StaleResponse(view_key)
    return result
