APP_TITLE = "Grupo Castro Fallas"

DEFAULT_API_BASE = "https://api.logisticacastrofallas.com"
SHIPMENTS_PATH = "/api/TransInternacional"
SHIPMENTS_ADD_PATH = "/api/TransInternacional/Agregar"
QUOTATIONS_PATH = "/api/Cotizacion"
QUOTATIONS_ADD_PATH = "/api/Cotizacion/Agregar"

# Pre-status codes that no longer count as active loads
EXCLUDED_STATUSES = frozenset({
    100000012, 100000023, 100000010, 100000022, 100000021, 100000019,
})

# Shipment (TransInternacional) columns
ETA_COL = "new_eta"
STATUS_COL = "new_preestado2"
EXECUTIVE_COL = "new_ejecutivocomercial"
CLIENT_COL = "_customerid_value"
POL_COL = "new_pol"
POE_COL = "new_poe"
EQUIPMENT_QTY_COL = "new_cantidadequipo"
EQUIPMENT_SIZE_COL = "new_tamanoequipo"
LEAD_ID_COL = "new_transinternacionalid"
COMMENT_COL = "new_comentario"

SHIPMENT_DATE_COLS = [ETA_COL]

# chart key -> shipment column
CHART_GROUPS = {
    "executive": EXECUTIVE_COL,
    "client": CLIENT_COL,
    "status": STATUS_COL,
    "pol": POL_COL,
    "poe": POE_COL,
}

# Quotation (Cotizacion) columns
QUOTATION_COLS = ["quo", "cliente", "estado", "cotizacion"]
SERVICE_FLAGS = ["maritimo", "aereo", "terrestre", "aduanas"]

# numFilter options shared by both list endpoints
QUOTATION_FILTERS = {"Todos": 0, "Cliente": 1, "Quo": 2}
LEAD_FILTERS = {"Todos": 0, "Cliente": 1, "Ejecutivo": 2}

KPI_CARDS = [
    ("today", "Cargas Hoy"),
    ("week", "Cargas Semana"),
    ("month", "Cargas Mes"),
    ("total", "Total Cargas"),
]

GENERIC_ERROR = "No se pudo completar la operación. Intente de nuevo."
