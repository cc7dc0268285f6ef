# tests/test_transfer.py

import json

import pytest

from quotebox.domain.errors import ParseError
from quotebox.domain.models import SEED_QUOTES, Quote
from quotebox.services import transfer_service


def test_export_is_indented_json_array():
    data = transfer_service.export_json([Quote("Café au lait", "Food")])

    assert isinstance(data, bytes)
    text = data.decode("utf-8")
    assert text.startswith("[\n  {\n    \"text\"")
    assert "Café au lait" in text
    assert json.loads(text) == [{"text": "Café au lait", "category": "Food"}]


def test_export_then_import_merges(store):
    exported = transfer_service.export_json(store.quotes)
    store.add("Stay hungry.", "Motivation")
    before = store.quotes

    imported = transfer_service.import_into(store, exported)

    assert imported == SEED_QUOTES
    assert store.quotes == before + SEED_QUOTES


@pytest.mark.parametrize(
    "payload",
    [
        b"{not json",
        b'{"text": "a", "category": "b"}',
        b'[{"text": "a"}]',
        b'[{"text": 1, "category": "b"}]',
        b'["just a string"]',
        b"\xff\xfe\x00",
    ],
)
def test_import_rejects_malformed_input(store, payload):
    before = store.quotes

    with pytest.raises(ParseError):
        transfer_service.import_into(store, payload)

    assert store.quotes == before


def test_import_accepts_str_and_bom():
    assert transfer_service.import_json('[{"text": "a", "category": "b"}]') == [Quote("a", "b")]
    bom = "\ufeff[]".encode("utf-8")
    assert transfer_service.import_json(bom) == []


def test_write_export_into_directory_uses_default_name(tmp_path):
    path = transfer_service.write_export(SEED_QUOTES, str(tmp_path))

    assert path.endswith("quotes.json")
    assert transfer_service.import_json(transfer_service.read_import(path)) == SEED_QUOTES
