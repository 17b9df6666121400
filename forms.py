# forms.py - write forms (quotation upload, lead upload, lead comment)
from __future__ import annotations
from typing import Dict, List, Optional
import streamlit as st

from api_client import ApiClient, ApiError
from ui import notify_error, notify_success

def missing_fields(values: Dict[str, object]) -> List[str]:
    """Names of required fields left empty (blank strings count as empty)."""
    out = []
    for name, v in values.items():
        if v is None or (isinstance(v, str) and not v.strip()):
            out.append(name)
    return out

def _warn_missing(missing: List[str]) -> None:
    st.warning(f"Complete los campos: {', '.join(missing)}")

def quotation_form(client: ApiClient) -> bool:
    """Returns True once a quotation was stored, so the caller can refresh the list."""
    with st.form("add_quotation", clear_on_submit=True):
        st.markdown("**Agregar Nueva Cotización**")
        quo = st.text_input("QUO")
        cliente = st.text_input("Cliente")
        pdf = st.file_uploader("Cotización (PDF)", type=["pdf"])
        submitted = st.form_submit_button("Guardar")
    if not submitted:
        return False

    missing = missing_fields({"QUO": quo, "Cliente": cliente, "Cotización": pdf})
    if missing:
        _warn_missing(missing)
        return False
    try:
        client.add_quotation(quo.strip(), cliente.strip(), pdf.name, pdf.getvalue())
    except ApiError as e:
        notify_error(e)
        return False
    notify_success("Cotización agregada")
    return True

def lead_form(client: ApiClient) -> bool:
    with st.form("add_lead", clear_on_submit=True):
        st.markdown("**Agregar Nuevo Lead**")
        nombre = st.text_input("Nombre")
        descripcion = st.text_area("Descripción")
        pdf = st.file_uploader("Documento (PDF)", type=["pdf"])
        submitted = st.form_submit_button("Guardar")
    if not submitted:
        return False

    missing = missing_fields({"Nombre": nombre, "Descripción": descripcion, "Documento": pdf})
    if missing:
        _warn_missing(missing)
        return False
    try:
        client.add_lead(nombre.strip(), descripcion.strip(), pdf.name, pdf.getvalue())
    except ApiError as e:
        notify_error(e)
        return False
    notify_success("Lead agregado")
    return True

def comment_form(client: ApiClient, record_ids: List[str], current: Optional[Dict[str, str]] = None) -> bool:
    if not record_ids:
        return False
    current = current or {}
    st.markdown("**Actualizar comentario**")
    # outside the form so the current comment reloads on selection
    record_id = st.selectbox("Registro", record_ids)
    with st.form("update_comment"):
        comment = st.text_area("Comentario", value=current.get(record_id) or "")
        submitted = st.form_submit_button("Guardar comentario")
    if not submitted:
        return False

    if missing_fields({"Comentario": comment}):
        _warn_missing(["Comentario"])
        return False
    try:
        client.update_comment(record_id, comment.strip())
    except ApiError as e:
        notify_error(e)
        return False
    notify_success("Comentario actualizado")
    return True
