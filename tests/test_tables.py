import pandas as pd

from constants import LEAD_ID_COL, POE_COL, STATUS_COL
from forms import missing_fields
from tables import LEAD_COLUMNS, leads_view, quotations_view


def test_leads_view_resolves_labels():
    df = pd.DataFrame({LEAD_ID_COL: ["g1"], STATUS_COL: [100000012], POE_COL: [999]})
    view = leads_view(df)
    assert list(view.columns) == list(LEAD_COLUMNS)
    row = view.iloc[0]
    assert row["Id"] == "g1"
    assert row["Preestado"] == "Cancelado"
    assert row["POE"] == ""
    assert row["Tamaño equipo"] == ""


def test_quotations_view_renames():
    df = pd.DataFrame({"quo": ["Q1"], "cliente": ["ACME"], "estado": [1], "cotizacion": ["http://x/q.pdf"], "aereo": [True]})
    assert list(quotations_view(df).columns) == ["QUO", "Cliente", "Estado", "Documento"]


def test_missing_fields():
    assert missing_fields({"QUO": "Q1", "Cliente": "  ", "PDF": None}) == ["Cliente", "PDF"]
    assert missing_fields({"QUO": "Q1", "PDF": object()}) == []
