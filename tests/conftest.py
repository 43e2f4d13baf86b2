import pytest

from yield_finder import config
from yield_finder.sugar import load_abi

USDC = config.USDC_ADDRESS
WETH = config.WETH_ADDRESS
UNKNOWN = "0x1111111111111111111111111111111111111111"


def make_pool(**overrides):
    pool = {
        "lp": "0x000000000000000000000000000000000000beef",
        "symbol": "vAMM-WETH/USDC",
        "decimals": 18,
        "liquidity": 10**18,
        "type": 0,
        "tick": 0,
        "sqrt_ratio": 0,
        "token0": WETH,
        "reserve0": 10 * 10**18,
        "staked0": 0,
        "token1": USDC,
        "reserve1": 33_000 * 10**6,
        "staked1": 0,
        "gauge": "0x000000000000000000000000000000000000cafe",
        "gauge_liquidity": 0,
        "gauge_alive": True,
        "fee": "0x0000000000000000000000000000000000000001",
        "bribe": "0x0000000000000000000000000000000000000002",
        "factory": "0x0000000000000000000000000000000000000003",
        "emissions": 10**16,
        "emissions_token": config.AERO_ADDRESS,
        "emissions_cap": 0,
    }
    pool.update(overrides)
    return pool


class FakeCall:
    def __init__(self, result):
        self.result = result

    def call(self):
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeFunctions:
    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def all(self, limit, offset):
        self.calls.append((limit, offset))
        return FakeCall(self.pages(limit, offset))


class FakeSugar:
    """Stands in for a web3 LpSugar contract; `pages(limit, offset)` returns the raw tuples."""

    def __init__(self, pages):
        self.abi = load_abi()
        self.functions = FakeFunctions(pages)


def as_tuple(pool):
    return tuple(pool.values())


@pytest.fixture
def prices():
    from yield_finder.prices import DEFAULT_PRICES
    return dict(DEFAULT_PRICES)
