#!/usr/bin/env python3
"""
Example 01: Check the trading wallet's balance.

Reads SOLANA_PRIVATE_KEY (from the environment or .env) and prints the SOL
balance, plus one token balance when a mint is given.

Usage:
    python examples/01_check_balance.py
    python examples/01_check_balance.py EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v
"""

import sys

from dex_trader.config import Settings
from dex_trader.tools import TraderToolkit

token = sys.argv[1] if len(sys.argv) > 1 else None

settings = Settings.from_env()
if not settings.has_wallet:
    print("Set SOLANA_PRIVATE_KEY first (see .env)")
    sys.exit(1)

toolkit = TraderToolkit.from_settings(settings)

# Toolkit output is the same text an agent sees
print("=== Toolkit output ===")
result = toolkit.get_balance(token)
print(result.to_text())

if result.ok:
    print("\n=== Structured output ===")
    print(f"Wallet: {result.data['wallet']}")
    print(f"SOL:    {result.data['solBalance']:.6f}")
    if "tokenBalance" in result.data:
        tb = result.data["tokenBalance"]
        print(f"Token:  {tb['uiAmount']} ({tb['mint'][:8]}..., {tb['decimals']} decimals)")
