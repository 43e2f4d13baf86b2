import os
from dotenv import load_dotenv

load_dotenv()

# ── Setup & Config ───────────────────────────────────────────────────────────────
RPC_URL           = os.getenv("RPC_URL", "https://mainnet.base.org")
LP_SUGAR_ADDRESS  = os.getenv("LP_SUGAR_ADDRESS", "0x68c19e13618C41158fE4bAba1B8fb3A9c74bDb0A")
LP_SUGAR_ABI_PATH = os.getenv(
    "LP_SUGAR_ABI_PATH",
    os.path.join(os.path.dirname(__file__), "abi", "LpSugar.json")
)
FETCH_LIMIT       = int(os.getenv("FETCH_LIMIT", 300))
RPC_TIMEOUT       = int(os.getenv("RPC_TIMEOUT", 60))
PRICE_TIMEOUT     = int(os.getenv("PRICE_TIMEOUT", 30))

# Coingecko endpoint
COINGECKO_SIMPLE_PRICE_URL = os.getenv(
    "COINGECKO_SIMPLE_PRICE_URL",
    "https://api.coingecko.com/api/v3/simple/price"
)

# price key → coingecko id
COINGECKO_IDS = {
    "aero": "aerodrome-finance",
    "eth":  "ethereum",
    "btc":  "wrapped-bitcoin",
}

# ── Base tokens ──────────────────────────────────────────────────────────────────
AERO_ADDRESS  = "0x940181a94a35A4569E4529A3CDfB74e38FD98631"
WETH_ADDRESS  = "0x4200000000000000000000000000000000000006"
CBBTC_ADDRESS = "0xcbB7C0000aB88B473b1f5aFd9ef808440eed33Bf"
USDC_ADDRESS  = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
USDBC_ADDRESS = "0xd9aAEc86B65D86f6A7B5B1b0c42FFA531710b6CA"
DAI_ADDRESS   = "0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb"

SECONDS_PER_YEAR = 31_536_000

# ── CLI defaults ─────────────────────────────────────────────────────────────────
DEFAULT_MIN_TVL = 10000
DEFAULT_LIMIT   = 10
DEFAULT_OFFSET  = 0
