"""
dex-trader: Solana token trading tools for AI agents, routed through Jupiter.

Usage:
    from dex_trader import JupiterClient, SolanaRPC, Wallet
    from dex_trader.tools import TraderToolkit
"""

from dex_trader.core.models import Balance, JupiterQuote, TokenBalance
from dex_trader.core.rpc import SolanaRPC
from dex_trader.core.wallet import Wallet
from dex_trader.defi.jupiter import JupiterClient

__version__ = "0.1.0"
__all__ = [
    "Balance",
    "JupiterClient",
    "JupiterQuote",
    "SolanaRPC",
    "TokenBalance",
    "Wallet",
]
