"""Tests for the GET /demos filter allow-list."""

import pytest

from common.errors import ValidationError
from common.filters import build_filter


def test_empty_query():
    assert build_filter({}) == {}


def test_typed_conditions():
    assert build_filter({"id": "3", "url": "http://a.b", "number": "-2"}) == {
        "id": 3,
        "url": "http://a.b",
        "number": -2,
    }


def test_number_null():
    assert build_filter({"number": "null"}) == {"number__isnull": True}


def test_unknown_keys_ignored():
    assert build_filter({"1 = 1 OR url": "x", "created_at": "2015", "number": "1"}) == {"number": 1}


@pytest.mark.parametrize("query, path", [
    ({"number": "abc"}, "number"),
    ({"number": "1.5"}, "number"),
    ({"id": "0"}, "id"),
    ({"id": "+1"}, "id"),
])
def test_bad_values(query, path):
    with pytest.raises(ValidationError) as exc_info:
        build_filter(query)

    assert exc_info.value.errors[0].path == path


def test_reports_every_bad_field():
    with pytest.raises(ValidationError) as exc_info:
        build_filter({"id": "x", "number": "y"})

    assert [error.path for error in exc_info.value.errors] == ["id", "number"]


@pytest.mark.parametrize("query, path", [
    ({"number": str(2**31)}, "number"),
    ({"number": str(-2**31 - 1)}, "number"),
    ({"number": str(2**70)}, "number"),
    ({"id": str(2**31)}, "id"),
])
def test_values_outside_column_range(query, path):
    with pytest.raises(ValidationError) as exc_info:
        build_filter(query)

    assert exc_info.value.errors[0].path == path


def test_column_range_edges():
    assert build_filter({"id": str(2**31 - 1), "number": str(-2**31)}) == {
        "id": 2**31 - 1,
        "number": -2**31,
    }
