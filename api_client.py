# api_client.py - thin client for the Castro Fallas REST API
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import requests

from constants import (
    QUOTATIONS_ADD_PATH,
    QUOTATIONS_PATH,
    SHIPMENTS_ADD_PATH,
    SHIPMENTS_PATH,
)

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Any failed call: transport, HTTP status, bad JSON or isSuccess=false."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _extract_message(payload: Any, status: Optional[int]) -> str:
    if isinstance(payload, dict):
        msg = payload.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return f"Error del servidor ({status})" if status else "Error del servidor"


def unwrap_envelope(payload: Any) -> List[Dict[str, Any]]:
    """
    Return `data.value` from a `{isSuccess, data: {value: [...]}, message}` body.
    Write endpoints may answer without a list; that is an empty result, not an error.
    """
    if not isinstance(payload, dict):
        raise ApiError("Respuesta inválida del servidor")
    if not payload.get("isSuccess"):
        raise ApiError(_extract_message(payload, None))
    data = payload.get("data")
    value = data.get("value") if isinstance(data, dict) else None
    if value is None:
        return []
    if not isinstance(value, list):
        raise ApiError("Respuesta inválida del servidor")
    return [v for v in value if isinstance(v, dict)]


class ApiClient:
    """
    One request per call: no retries, no pagination. `timeout` is a per-request
    cap in seconds (REQUEST_TIMEOUT); pass None to wait as long as requests does.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: Optional[float] = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, **kwargs) -> List[Dict[str, Any]]:
        url = self._url(path)
        try:
            resp = self.session.request(
                method, url, headers=self._headers(), timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError(f"No se pudo contactar el servidor: {e}") from e

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if resp.status_code >= 400:
            logger.error("%s %s -> HTTP %s", method, url, resp.status_code)
            raise ApiError(_extract_message(payload, resp.status_code), resp.status_code)
        if payload is None:
            logger.error("%s %s -> body is not JSON", method, url)
            raise ApiError("Respuesta inválida del servidor", resp.status_code)

        try:
            records = unwrap_envelope(payload)
        except ApiError as e:
            logger.warning("%s %s -> %s", method, url, e.message)
            raise
        logger.info("%s %s -> %d records", method, url, len(records))
        return records

    # ---------- reads ----------
    def list_shipments(self, num_filter: int = 0, text_filter: str = "") -> List[Dict[str, Any]]:
        return self._request(
            "GET", SHIPMENTS_PATH, params={"numFilter": num_filter, "textFilter": text_filter}
        )

    def list_quotations(self, num_filter: int = 0, text_filter: str = "") -> List[Dict[str, Any]]:
        return self._request(
            "GET", QUOTATIONS_PATH, params={"numFilter": num_filter, "textFilter": text_filter}
        )

    # ---------- writes ----------
    def add_quotation(self, quo: str, cliente: str, filename: str, content: bytes) -> List[Dict[str, Any]]:
        return self._request(
            "POST",
            QUOTATIONS_ADD_PATH,
            data={"Quo": quo, "Cliente": cliente, "Estado": "1"},
            files={"Cotizacion": (filename, content, "application/pdf")},
        )

    def add_lead(self, nombre: str, descripcion: str, filename: str, content: bytes) -> List[Dict[str, Any]]:
        return self._request(
            "POST",
            SHIPMENTS_ADD_PATH,
            data={"Nombre": nombre, "Descripcion": descripcion},
            files={"Archivo": (filename, content, "application/pdf")},
        )

    def update_comment(self, record_id: str, comment: str) -> List[Dict[str, Any]]:
        return self._request(
            "PATCH", SHIPMENTS_ADD_PATH, json={"Id": record_id, "Comentario": comment}
        )
