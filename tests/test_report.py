"""Tests for filtering, sorting and emitting pools."""
import json

from yield_finder.report import render_json, save_json, select_top


def _pool(symbol, tvl, apr):
    return {"symbol": symbol, "address": "0x" + symbol, "tvl": tvl, "apr": apr,
            "emissionsPerYear": 0.0, "type": "Volatile"}


POOLS = [
    _pool("a", 50_000, 10.0),
    _pool("b", 5_000, 900.0),
    _pool("c", 10_000, 40.0),
    _pool("d", 1_000_000, 25.0),
    _pool("e", 0, 0.0),
]


def test_select_top_filters_by_min_tvl():
    out = select_top(POOLS, 10_000, 10)
    assert all(p["tvl"] >= 10_000 for p in out)
    assert "b" not in [p["symbol"] for p in out]


def test_select_top_min_tvl_is_inclusive():
    assert "c" in [p["symbol"] for p in select_top(POOLS, 10_000, 10)]


def test_select_top_sorted_by_apr_desc():
    out = select_top(POOLS, 0, 10)
    aprs = [p["apr"] for p in out]
    assert aprs == sorted(aprs, reverse=True)
    assert out[0]["symbol"] == "b"


def test_select_top_respects_limit():
    assert [p["symbol"] for p in select_top(POOLS, 10_000, 2)] == ["c", "d"]
    assert select_top(POOLS, 0, 0) == []


def test_render_json_is_pretty_array():
    text = render_json(POOLS[:1])
    assert text.startswith("[\n  {")
    assert json.loads(text) == POOLS[:1]


def test_save_json_creates_directories(tmp_path):
    path = tmp_path / "data" / "top_pools.json"
    save_json(POOLS, str(path))
    assert json.loads(path.read_text()) == POOLS
