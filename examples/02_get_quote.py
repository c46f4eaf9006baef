#!/usr/bin/env python3
"""
Example 02: Get a swap quote from Jupiter.

Fetches a live quote for SOL -> USDC showing output amount, minimum output,
price impact and the route across DEXs. No wallet needed.

Usage:
    python examples/02_get_quote.py
    python examples/02_get_quote.py 2.5            # quote 2.5 SOL
    python examples/02_get_quote.py 2.5 <mint>     # quote 2.5 SOL for another token
"""

import sys

from dex_trader import JupiterClient
from dex_trader.core.units import SOL_MINT, from_raw_amount, to_raw_amount

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

amount_sol = float(sys.argv[1]) if len(sys.argv) > 1 else 1.0
output_mint = sys.argv[2] if len(sys.argv) > 2 else USDC_MINT

print(f"Getting quote: {amount_sol} SOL -> {output_mint[:8]}...")
print()

with JupiterClient() as jupiter:
    quote = jupiter.get_quote(SOL_MINT, output_mint, to_raw_amount(amount_sol, 9), slippage_bps=50)

print("=== Swap Quote ===")
print(f"Input:          {from_raw_amount(quote.in_amount, 9)} SOL")
print(f"Output:         {quote.out_amount} (raw units)")
print(f"Minimum output: {quote.other_amount_threshold} (raw units, 0.5% slippage)")
print(f"Price impact:   {quote.price_impact_pct}%")
print(f"Route:          {quote.route_summary()}")
