from unittest import mock

import pytest
import requests

from api_client import ApiClient, ApiError, unwrap_envelope

BASE = "https://api.example.test/"


def _response(payload=None, status=200, bad_json=False):
    resp = mock.Mock(status_code=status)
    if bad_json:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = payload
    return resp


def _client(resp=None, error=None, token=None):
    session = mock.Mock()
    if error is not None:
        session.request.side_effect = error
    else:
        session.request.return_value = resp
    return ApiClient(BASE, token=token, timeout=5, session=session), session


def ok(value):
    return {"isSuccess": True, "data": {"value": value}, "message": ""}


def test_list_shipments_sends_filters_and_returns_records():
    client, session = _client(_response(ok([{"new_preestado2": 1}])))
    assert client.list_shipments(2, "acme") == [{"new_preestado2": 1}]
    args, kwargs = session.request.call_args
    assert args == ("GET", "https://api.example.test/api/TransInternacional")
    assert kwargs["params"] == {"numFilter": 2, "textFilter": "acme"}
    assert kwargs["timeout"] == 5
    assert "Authorization" not in kwargs["headers"]


def test_list_quotations_with_token():
    client, session = _client(_response(ok([])), token="abc")
    assert client.list_quotations() == []
    args, kwargs = session.request.call_args
    assert args[1].endswith("/api/Cotizacion")
    assert kwargs["params"] == {"numFilter": 0, "textFilter": ""}
    assert kwargs["headers"]["Authorization"] == "Bearer abc"


def test_application_failure_raises_with_server_message():
    client, _ = _client(_response({"isSuccess": False, "message": "Sin permisos"}))
    with pytest.raises(ApiError) as exc:
        client.list_quotations()
    assert exc.value.message == "Sin permisos"


def test_transport_failure_raises_same_error_type():
    client, _ = _client(error=requests.ConnectionError("down"))
    with pytest.raises(ApiError):
        client.list_shipments()


def test_http_error_status_raises():
    client, _ = _client(_response({"message": "boom"}, status=500))
    with pytest.raises(ApiError) as exc:
        client.list_shipments()
    assert exc.value.status_code == 500
    assert exc.value.message == "boom"


def test_non_json_body_raises():
    client, _ = _client(_response(status=200, bad_json=True))
    with pytest.raises(ApiError):
        client.list_shipments()


def test_add_quotation_is_multipart():
    client, session = _client(_response({"isSuccess": True, "data": None}))
    assert client.add_quotation("Q-1", "ACME", "q.pdf", b"%PDF") == []
    args, kwargs = session.request.call_args
    assert args == ("POST", "https://api.example.test/api/Cotizacion/Agregar")
    assert kwargs["data"] == {"Quo": "Q-1", "Cliente": "ACME", "Estado": "1"}
    assert kwargs["files"]["Cotizacion"] == ("q.pdf", b"%PDF", "application/pdf")


def test_add_lead_is_multipart():
    client, session = _client(_response({"isSuccess": True}))
    client.add_lead("Nuevo", "Detalle", "l.pdf", b"%PDF")
    args, kwargs = session.request.call_args
    assert args == ("POST", "https://api.example.test/api/TransInternacional/Agregar")
    assert kwargs["data"] == {"Nombre": "Nuevo", "Descripcion": "Detalle"}
    assert "Archivo" in kwargs["files"]


def test_update_comment_is_json_patch():
    client, session = _client(_response({"isSuccess": True}))
    client.update_comment("guid-1", "listo")
    args, kwargs = session.request.call_args
    assert args == ("PATCH", "https://api.example.test/api/TransInternacional/Agregar")
    assert kwargs["json"] == {"Id": "guid-1", "Comentario": "listo"}


def test_unwrap_envelope_edges():
    assert unwrap_envelope(ok([{"a": 1}, "junk"])) == [{"a": 1}]
    with pytest.raises(ApiError):
        unwrap_envelope([])
    with pytest.raises(ApiError):
        unwrap_envelope({"isSuccess": True, "data": {"value": "x"}})
    with pytest.raises(ApiError) as exc:
        unwrap_envelope({"isSuccess": False})
    assert exc.value.message
