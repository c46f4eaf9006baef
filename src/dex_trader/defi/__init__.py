"""defi module init"""
from dex_trader.defi.jupiter import (
    JupiterClient,
    JupiterError,
    JupiterTimeoutError,
    UpstreamQuoteError,
    UpstreamSwapBuildError,
)

__all__ = [
    "JupiterClient",
    "JupiterError",
    "JupiterTimeoutError",
    "UpstreamQuoteError",
    "UpstreamSwapBuildError",
]
