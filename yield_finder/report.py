import os
import json


def select_top(pools, min_tvl, limit):
    """
    Keep pools with tvl >= min_tvl, sort by APR (descending), keep the first `limit`.
    """
    kept = [p for p in pools if p["tvl"] >= min_tvl]
    kept.sort(key=lambda p: p["apr"], reverse=True)
    return kept[:max(limit, 0)]


def render_json(pools) -> str:
    return json.dumps(pools, indent=2)


def save_json(pools, path):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        json.dump(pools, f, indent=2)
