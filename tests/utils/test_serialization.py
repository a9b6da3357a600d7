"""
Tests for JSON wire serialization
"""
import datetime
import json
from types import MappingProxyType

import pytest

from seam_rpc.utils.serialization import from_json, to_json


def test_envelope_to_json():
    envelope = {"jsonrpc": "2.0", "id": 1, "result": [1, "2", {"3": 4}]}

    assert json.loads(to_json(envelope)) == envelope


def test_dates_as_iso_strings():
    data = {"day": datetime.date(2024, 2, 29), "at": datetime.datetime(2024, 2, 29, 8, 15)}

    assert json.loads(to_json(data)) == {"day": "2024-02-29", "at": "2024-02-29T08:15:00"}


def test_tuples_sets_and_mappings():
    data = {"pair": (1, 2), "tags": {"a"}, "proxy": MappingProxyType({"k": "v"})}

    assert json.loads(to_json(data)) == {"pair": [1, 2], "tags": ["a"], "proxy": {"k": "v"}}


def test_unserializable_value():
    with pytest.raises(TypeError):
        to_json({"obj": object()})


def test_from_json_bytes_and_text():
    assert from_json(b'{"id": 1}') == {"id": 1}
    assert from_json('{"id": 1}') == {"id": 1}


def test_from_json_invalid():
    with pytest.raises(json.JSONDecodeError):
        from_json(b"{not json")
