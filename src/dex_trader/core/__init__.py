"""core module init"""
from dex_trader.core.cache import DecimalsCache
from dex_trader.core.models import Balance, BlockhashInfo, JupiterQuote, RoutePlanStep, SwapInfo, TokenBalance
from dex_trader.core.rpc import (
    ConfirmationTimeoutError,
    RPCTimeoutError,
    SolanaRPC,
    SolanaRPCError,
    SubmissionError,
)
from dex_trader.core.units import (
    LAMPORTS_PER_SOL,
    SOL_DECIMALS,
    SOL_MINT,
    AmountError,
    from_raw_amount,
    resolve_mint,
    to_raw_amount,
)
from dex_trader.core.wallet import InvalidSecretError, Wallet, WalletError

__all__ = [
    "AmountError",
    "Balance",
    "BlockhashInfo",
    "ConfirmationTimeoutError",
    "DecimalsCache",
    "InvalidSecretError",
    "JupiterQuote",
    "LAMPORTS_PER_SOL",
    "RPCTimeoutError",
    "RoutePlanStep",
    "SOL_DECIMALS",
    "SOL_MINT",
    "SolanaRPC",
    "SolanaRPCError",
    "SubmissionError",
    "SwapInfo",
    "TokenBalance",
    "Wallet",
    "WalletError",
    "from_raw_amount",
    "resolve_mint",
    "to_raw_amount",
]
