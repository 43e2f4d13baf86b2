import logging
from decimal import Decimal
from tqdm import tqdm

from .config import (
    AERO_ADDRESS, WETH_ADDRESS, CBBTC_ADDRESS,
    USDC_ADDRESS, USDBC_ADDRESS, DAI_ADDRESS,
    SECONDS_PER_YEAR,
)

logger = logging.getLogger(__name__)

ZERO = Decimal(0)

# lowercase token → (decimals, price key); None means a $1 stablecoin
KNOWN_TOKENS = {
    USDC_ADDRESS.lower():  (6,  None),
    USDBC_ADDRESS.lower(): (6,  None),
    DAI_ADDRESS.lower():   (18, None),
    WETH_ADDRESS.lower():  (18, "eth"),
    AERO_ADDRESS.lower():  (18, "aero"),
    CBBTC_ADDRESS.lower(): (8,  "btc"),
}

POOL_TYPES = {0: "Volatile", 1: "Stable"}


def token_value(token_addr: str, amount, prices: dict) -> Decimal:
    """
    USD value of a raw token amount, or 0 for tokens not in KNOWN_TOKENS.
    """
    known = KNOWN_TOKENS.get(token_addr.lower())
    if known is None:
        return ZERO
    decimals, price_key = known
    value = Decimal(amount) / (Decimal(10) ** decimals)
    if price_key is not None:
        value *= Decimal(prices[price_key])
    return value


def estimate_tvl(val0: Decimal, val1: Decimal) -> Decimal:
    # One known side is doubled, assuming a roughly 50/50 pool.
    if val0 > 0 and val1 > 0:
        return val0 + val1
    if val0 > 0:
        return val0 * 2
    if val1 > 0:
        return val1 * 2
    return ZERO


def annual_emissions(emissions) -> Decimal:
    """Emissions are AERO per second with 18 decimals."""
    return Decimal(emissions) / (Decimal(10) ** 18) * SECONDS_PER_YEAR


def estimate_apr(annual_reward_usd: Decimal, tvl: Decimal) -> Decimal:
    if tvl == 0:
        return ZERO
    return annual_reward_usd / tvl * 100


def pool_type_label(code) -> str:
    return POOL_TYPES.get(int(code), "Concentrated")


def process_pool(pool: dict, prices: dict) -> dict:
    val0 = token_value(pool["token0"], pool["reserve0"], prices)
    val1 = token_value(pool["token1"], pool["reserve1"], prices)
    tvl = estimate_tvl(val0, val1)

    emissions_per_year = annual_emissions(pool["emissions"])
    annual_reward_usd = emissions_per_year * Decimal(prices["aero"])

    return {
        "symbol":           pool["symbol"],
        "address":          pool["lp"],
        "tvl":              float(tvl),
        "apr":              float(estimate_apr(annual_reward_usd, tvl)),
        "emissionsPerYear": float(emissions_per_year),
        "type":             pool_type_label(pool["type"]),
    }


def active_pools(pools):
    """Drop pools whose gauge is dead."""
    return [p for p in pools if p.get("gauge_alive", False) is True]


def process_pools(pools, prices: dict, progress: bool = True) -> list:
    active = active_pools(pools)
    logger.info(f"Active pools: {len(active)}")
    return [
        process_pool(p, prices)
        for p in tqdm(active, desc="Processing pools", unit="pool", disable=not progress)
    ]
