from __future__ import annotations
import streamlit as st
import pandas as pd

from constants import (
    CLIENT_COL, COMMENT_COL, EQUIPMENT_QTY_COL, EQUIPMENT_SIZE_COL, ETA_COL,
    EXECUTIVE_COL, LEAD_ID_COL, POE_COL, POL_COL, STATUS_COL,
)
from lookups import (
    cant_equipo_name, ejecutivo_name, poe_name, pol_name, status_name, tamano_equipo_name,
)

# display column -> (source column, resolver or None)
LEAD_COLUMNS = {
    "Id": (LEAD_ID_COL, None),
    "Cliente": (CLIENT_COL, None),
    "Ejecutivo": (EXECUTIVE_COL, ejecutivo_name),
    "Preestado": (STATUS_COL, status_name),
    "POL": (POL_COL, pol_name),
    "POE": (POE_COL, poe_name),
    "Cant. equipo": (EQUIPMENT_QTY_COL, cant_equipo_name),
    "Tamaño equipo": (EQUIPMENT_SIZE_COL, tamano_equipo_name),
    "ETA": (ETA_COL, None),
    "Comentario": (COMMENT_COL, None),
}

def leads_view(df: pd.DataFrame) -> pd.DataFrame:
    out = pd.DataFrame(index=df.index)
    for title, (col, resolve) in LEAD_COLUMNS.items():
        if col not in df.columns:
            out[title] = None if resolve is None else ""
        elif resolve is None:
            out[title] = df[col]
        else:
            out[title] = df[col].map(resolve)
    return out.reset_index(drop=True)

def quotations_view(df: pd.DataFrame) -> pd.DataFrame:
    return (
        df[["quo", "cliente", "estado", "cotizacion"]]
        .rename(columns={"quo": "QUO", "cliente": "Cliente", "estado": "Estado", "cotizacion": "Documento"})
        .reset_index(drop=True)
    )

def quotations_table(df: pd.DataFrame) -> None:
    st.subheader("Cotizaciones")
    if df.empty:
        st.info("No hay cotizaciones con los filtros actuales.")
        return
    st.dataframe(
        quotations_view(df),
        use_container_width=True,
        column_config={"Documento": st.column_config.LinkColumn("Documento", display_text="Ver PDF")},
    )

def leads_table(df: pd.DataFrame) -> None:
    st.subheader("Leads")
    if df.empty:
        st.info("No hay leads con los filtros actuales.")
        return
    st.dataframe(leads_view(df), use_container_width=True)

def download_filtered(df: pd.DataFrame, filename: str) -> None:
    csv = df.to_csv(index=False).encode("utf-8")
    st.download_button("Descargar datos filtrados (CSV)", csv, filename, "text/csv")
