import json
import logging
from web3 import Web3
from web3.exceptions import ContractLogicError

from .config import RPC_URL, LP_SUGAR_ADDRESS, LP_SUGAR_ABI_PATH, RPC_TIMEOUT

logger = logging.getLogger(__name__)


class SugarError(Exception):
    """Raised when pools cannot be read from the LpSugar contract."""


def load_abi(path=LP_SUGAR_ABI_PATH):
    with open(path, "r") as f:
        return json.load(f)


def get_sugar_contract(rpc_url=RPC_URL, address=LP_SUGAR_ADDRESS, abi_path=LP_SUGAR_ABI_PATH):
    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": RPC_TIMEOUT}))
    return w3.eth.contract(
        address=Web3.to_checksum_address(address),
        abi=load_abi(abi_path)
    )


def field_names(abi):
    """
    Find the `all` function's output components so we know field names/order,
    e.g. ["lp", "symbol", "decimals", …].
    """
    for item in abi:
        if item.get("name") == "all" and item.get("type") == "function":
            return [c["name"] for c in item["outputs"][0]["components"]]
    raise SugarError("Could not find `all` in LpSugar ABI.")


def serialize_value(val):
    """HexBytes/bytes become 0x-prefixed hex; everything else is left as-is."""
    if isinstance(val, (bytes, bytearray)):
        return "0x" + val.hex()
    return val


def to_pool_dicts(raw_pools, names):
    return [
        {name: serialize_value(val) for name, val in zip(names, entry)}
        for entry in raw_pools
    ]


def fetch_pools(contract, limit, offset=0):
    """
    Single lp_sugar.all(limit, offset) call, no retry.
    Returns a list of pool dicts keyed by the Lp struct field names.
    """
    names = field_names(contract.abi)
    try:
        raw = contract.functions.all(limit, offset).call()
    except Exception as e:
        raise SugarError(f"LpSugar.all({limit}, {offset}) failed: {e}") from e
    return to_pool_dicts(raw, names)


def fetch_all_pools(contract, page_size, offset=0):
    """
    Call lp_sugar.all(page_size, offset) repeatedly until it returns empty or reverts.
    """
    names = field_names(contract.abi)
    all_pools = []
    while True:
        try:
            batch = contract.functions.all(page_size, offset).call()
        except ContractLogicError:
            # Once offset is beyond number of pools, sugar reverts.
            break
        except Exception as e:
            raise SugarError(f"LpSugar.all({page_size}, {offset}) failed: {e}") from e
        if not batch:
            break
        logger.info(f"   → Page at offset {offset}: {len(batch)} pools")
        all_pools.extend(batch)
        offset += page_size
    return to_pool_dicts(all_pools, names)
