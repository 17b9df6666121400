from __future__ import annotations
import os
import streamlit as st

def get_secret(key: str, default: str | None = None) -> str | None:
    v = os.environ.get(key)
    if v:
        return v
    try:
        v = st.secrets.get(key)  # type: ignore[attr-defined]
    except Exception:
        # no secrets.toml outside `streamlit run`
        return default
    return v if v not in (None, "") else default
