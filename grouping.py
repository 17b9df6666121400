from __future__ import annotations
from typing import Any, Callable, Dict
import pandas as pd

from constants import CHART_GROUPS

def _as_key(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)

def group_counts(df: pd.DataFrame, field: str) -> Dict[str, int]:
    """Occurrences of each non-null value of `field`; nulls are skipped."""
    if df.empty or field not in df.columns:
        return {}
    counts: Dict[str, int] = {}
    for value in df[field].dropna():
        key = _as_key(value)
        counts[key] = counts.get(key, 0) + 1
    return counts

def build_chart_data(df: pd.DataFrame) -> Dict[str, Dict[str, int]]:
    return {name: group_counts(df, col) for name, col in CHART_GROUPS.items()}

def labelled_series(
    counts: Dict[str, int],
    label: Callable[[str], str] | None = None,
    fmt: str = "{}",
) -> pd.DataFrame:
    """
    Frequency table -> `label`/`value` frame for charting. Codes whose
    resolved label is empty are dropped.
    """
    rows = []
    for code, value in counts.items():
        name = label(code) if label else code
        if not name:
            continue
        rows.append({"label": fmt.format(name), "value": int(value)})
    return pd.DataFrame(rows, columns=["label", "value"])
