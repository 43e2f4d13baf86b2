"""
Aerodrome Yield Finder
----------------------

This package contains modules for:
- prices: Fetching AERO/ETH/BTC USD prices from CoinGecko
- sugar: Reading pools from the LpSugar contract on Base
- metrics: Estimating TVL and emission APR per pool
- report: Filtering, sorting and emitting the top pools as JSON
"""
