import numpy as np
import pytest

from lookups import (
    TABLES, ejecutivo_name, load_table, poe_name, pol_name, resolve_label, status_name,
)


@pytest.mark.parametrize("name", sorted(TABLES))
def test_every_table_loads(name):
    table = load_table(name)
    assert len(table) > 0
    assert all(isinstance(k, str) and isinstance(v, str) for k, v in table.items())


def test_tables_are_read_only_and_loaded_once():
    table = load_table("status")
    assert load_table("status") is table
    with pytest.raises(TypeError):
        table["1"] = "x"


@pytest.mark.parametrize("code", [None, np.nan, "", "nope", 0, -1, 3.5, [1, 2], {"a": 1}])
def test_unknown_codes_resolve_to_empty_string(code):
    assert status_name(code) == ""


def test_int_string_and_float_codes_resolve_alike():
    assert status_name(100000012) == "Cancelado"
    assert status_name("100000012") == "Cancelado"
    assert status_name(100000012.0) == "Cancelado"


def test_named_resolvers():
    assert pol_name(1) == "Shanghai"
    assert poe_name("1") == "Moín"
    assert ejecutivo_name(99) == ""


def test_resolve_label_on_plain_mapping():
    assert resolve_label({"a": "A"}, "a") == "A"
    assert resolve_label({}, "a") == ""
