#!/usr/bin/env python3
"""
Example 03: Round-trip a token (buy, then sell it straight back).

WARNING: this signs and submits two real mainnet transactions with the
wallet in SOLANA_PRIVATE_KEY. Use a small amount.

Usage:
    python examples/03_buy_and_sell.py <token_mint> [sol_amount] [slippage_bps]
"""

import sys

from dex_trader.config import Settings, configure_logging
from dex_trader.tools import TraderToolkit

if len(sys.argv) < 2:
    print(__doc__)
    sys.exit(1)

token_mint = sys.argv[1]
sol_amount = float(sys.argv[2]) if len(sys.argv) > 2 else 0.01
slippage_bps = int(sys.argv[3]) if len(sys.argv) > 3 else 100

settings = Settings.from_env()
configure_logging(settings.log_level)
toolkit = TraderToolkit.from_settings(settings)

result = toolkit.buy_and_sell(token_mint, sol_amount, slippage_bps=slippage_bps)

if result.status == "success":
    print(f"Buy:  {result.data['explorer_buy']}")
    print(f"Sell: {result.data['explorer_sell']}")
    print(f"Net:  {result.data['net_sol']:+.9f} SOL")
elif result.status == "partial":
    # Bought but could not sell: the position is still open
    print(f"Bought {result.data['token_received']} raw units, sell failed: {result.error}")
    print(f"Buy:  {result.data['explorer']}")
else:
    print(result.to_text())
