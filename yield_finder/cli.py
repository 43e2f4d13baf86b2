#!/usr/bin/env python3
import argparse
import logging
import signal
import sys

from . import config
from .prices import fetch_prices
from .sugar import get_sugar_contract, fetch_pools, fetch_all_pools
from .metrics import process_pools
from .report import select_top, render_json, save_json

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# Gracefully handle Ctrl+C
def handle_sigint(sig, frame):
    print("\n🛑  Interrupted by user, exiting.", file=sys.stderr)
    sys.exit(0)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="aero-yield-finder",
        description="Top Aerodrome pools on Base by emission APR"
    )
    parser.add_argument("--min-tvl", type=float, default=config.DEFAULT_MIN_TVL, help="Minimum TVL in USD")
    parser.add_argument("--limit", type=int, default=config.DEFAULT_LIMIT, help="Number of pools to output")
    parser.add_argument("--offset", type=int, default=config.DEFAULT_OFFSET, help="Sugar pool offset")
    parser.add_argument("--rpc-url", type=str, default=config.RPC_URL, help="Base RPC endpoint (default: $RPC_URL)")
    parser.add_argument("--all", action="store_true", help="Page through every pool from --offset")
    parser.add_argument("--output", type=str, help="Also save the JSON result to this path")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def run(args):
    logger.info("Fetching token prices...")
    prices = fetch_prices()
    logger.info(f"Prices: AERO=${prices['aero']}, ETH=${prices['eth']}, BTC=${prices['btc']}")

    try:
        logger.info(f"Connecting to Base via {args.rpc_url}...")
        lp_sugar = get_sugar_contract(rpc_url=args.rpc_url)

        if args.all:
            pools = fetch_all_pools(lp_sugar, config.FETCH_LIMIT, args.offset)
        else:
            pools = fetch_pools(lp_sugar, config.FETCH_LIMIT, args.offset)
        logger.info(f"Fetched {len(pools)} pools. Processing...")

        processed = process_pools(pools, prices, progress=not args.quiet)
        top = select_top(processed, args.min_tvl, args.limit)
    except Exception as e:
        logger.error(f"❌ Error fetching pools: {e}")
        sys.exit(1)

    print(render_json(top))

    if args.output:
        save_json(top, args.output)
        logger.info(f"✅ Saved {len(top)} pools to {args.output}")
    return top


def main(argv=None):
    signal.signal(signal.SIGINT, handle_sigint)
    args = build_parser().parse_args(argv)
    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)
    run(args)


if __name__ == "__main__":
    main()
