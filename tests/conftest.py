"""Shared fixtures for dex-trader tests."""

import base58
import pytest
from solders.keypair import Keypair

from dex_trader.core.models import JupiterQuote
from dex_trader.core.units import SOL_MINT

USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
BONK_MINT = "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"


def quote_payload(
    input_mint: str = SOL_MINT,
    output_mint: str = USDC_MINT,
    in_amount: str = "500000000",
    out_amount: str = "75000000",
    slippage_bps: int = 50,
    **extra,
) -> dict:
    """A Jupiter /quote response with a two-hop route."""
    payload = {
        "inputMint": input_mint,
        "inAmount": in_amount,
        "outputMint": output_mint,
        "outAmount": out_amount,
        "otherAmountThreshold": str(int(out_amount) * (10_000 - slippage_bps) // 10_000),
        "swapMode": "ExactIn",
        "slippageBps": slippage_bps,
        "platformFee": None,
        "priceImpactPct": "0.0012",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": "HcoJqG325TTifs6jyWvRJ9ET4pDu12Xrt2EQKZGFmuKX",
                    "label": "Whirlpool",
                    "inputMint": input_mint,
                    "outputMint": output_mint,
                    "inAmount": str(int(in_amount) * 7 // 10),
                    "outAmount": str(int(out_amount) * 7 // 10),
                    "feeAmount": "1000",
                    "feeMint": input_mint,
                },
                "percent": 70,
            },
            {
                "swapInfo": {
                    "ammKey": "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2",
                    "label": "Raydium",
                    "inputMint": input_mint,
                    "outputMint": output_mint,
                    "inAmount": str(int(in_amount) * 3 // 10),
                    "outAmount": str(int(out_amount) * 3 // 10),
                    "feeAmount": "500",
                    "feeMint": input_mint,
                },
                "percent": 30,
            },
        ],
        "contextSlot": 287654321,
        "timeTaken": 0.012,
    }
    payload.update(extra)
    return payload


def make_quote(**kwargs) -> JupiterQuote:
    return JupiterQuote.from_response(quote_payload(**kwargs))


@pytest.fixture
def keypair():
    return Keypair()


@pytest.fixture
def secret(keypair):
    """base58 64-byte secret for the keypair fixture."""
    return base58.b58encode(bytes(keypair)).decode()
