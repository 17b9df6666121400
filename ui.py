from __future__ import annotations
import logging
import streamlit as st

from api_client import ApiError
from constants import GENERIC_ERROR

logger = logging.getLogger(__name__)

def header(app_title: str, page_title: str | None = None) -> None:
    st.set_page_config(page_title=page_title or app_title, layout="wide")
    st.title(page_title or app_title)

def notify_error(err: ApiError | None = None) -> None:
    """Every failure looks the same to the user; the detail only goes to the log."""
    if err is not None:
        logger.error("API call failed: %s", err)
    st.toast(GENERIC_ERROR, icon="⚠️")
    st.error(GENERIC_ERROR)

def notify_success(message: str) -> None:
    st.toast(message, icon="✅")

def footer_description() -> None:
    with st.expander("ℹ️ Acerca de este panel", expanded=False):
        st.markdown(
            """
            **Cargas activas**: registros sin ETA o con ETA desde hoy en adelante,
            excluyendo los preestados cerrados (cancelado, entregado, facturado, etc.).
            Las tarjetas cuentan cargas con ETA en el día, la semana y el mes actuales;
            el total incluye también las cargas sin ETA.

            Los permisos mostrados aquí son solo indicativos; el API valida cada operación.
            """
        )
