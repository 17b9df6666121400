# lookups.py - static code -> label tables shipped under data/
from __future__ import annotations
import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import pandas as pd

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"

TABLES = {
    "pol": "pol.json",
    "poe": "poe.json",
    "status": "status.json",
    "cant_equipo": "cantEquipo.json",
    "tamano_equipo": "tamanoEquipo.json",
    "ejecutivo": "ejecutivo.json",
}


def _key(code: Any) -> str | None:
    if code is None:
        return None
    try:
        if pd.isna(code):
            return None
    except (TypeError, ValueError):
        return None
    # 100000012.0 (pandas upcast on columns with nulls) -> "100000012"
    if isinstance(code, float) and code.is_integer():
        code = int(code)
    return str(code).strip()


@lru_cache(maxsize=None)
def load_table(name: str) -> Mapping[str, str]:
    """Read-only mapping for one table, read from disk once per process."""
    path = DATA_DIR / TABLES[name]
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    logger.info("Loaded %d labels from %s", len(raw), path.name)
    return MappingProxyType({str(k): str(v) for k, v in raw.items()})


def resolve_label(table: Mapping[str, str], code: Any) -> str:
    """Label for `code`, or "" when the code is missing or unknown."""
    k = _key(code)
    if k is None:
        return ""
    return table.get(k, "")


def pol_name(code: Any) -> str:
    return resolve_label(load_table("pol"), code)

def poe_name(code: Any) -> str:
    return resolve_label(load_table("poe"), code)

def status_name(code: Any) -> str:
    return resolve_label(load_table("status"), code)

def cant_equipo_name(code: Any) -> str:
    return resolve_label(load_table("cant_equipo"), code)

def tamano_equipo_name(code: Any) -> str:
    return resolve_label(load_table("tamano_equipo"), code)

def ejecutivo_name(code: Any) -> str:
    return resolve_label(load_table("ejecutivo"), code)
