"""
Integration tests against the live Jupiter API and Solana mainnet RPC.

Read-only: nothing here signs or submits a transaction.
Skipped unless DEX_TRADER_LIVE=1.

Run:  DEX_TRADER_LIVE=1 pytest tests/integration/ -v -m integration
"""

import os

import pytest

from conftest import USDC_MINT
from dex_trader.core.rpc import SolanaRPC
from dex_trader.core.units import SOL_MINT
from dex_trader.defi.jupiter import JupiterClient
from dex_trader.tools.toolkit import TraderToolkit

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(os.environ.get("DEX_TRADER_LIVE") != "1", reason="set DEX_TRADER_LIVE=1 to run"),
]

# Circle's USDC treasury; holds USDC in a token account
USDC_HOLDER = "7VHUFJHWu2CuExkJcJrzhQPJ2oygupTWkL2A2For4BmE"


@pytest.fixture(scope="module")
def rpc():
    r = SolanaRPC(timeout=30.0)
    yield r
    r.close()


@pytest.fixture(scope="module")
def jupiter():
    j = JupiterClient(timeout=30.0)
    yield j
    j.close()


class TestJupiterLive:

    def test_quote_sol_to_usdc(self, jupiter):
        quote = jupiter.get_quote(SOL_MINT, USDC_MINT, 100_000_000, 50)
        assert quote.input_mint == SOL_MINT
        assert quote.output_mint == USDC_MINT
        assert quote.out_amount_raw > 0
        assert quote.minimum_out_raw <= quote.out_amount_raw
        assert quote.route_plan

    def test_toolkit_quote_text(self, rpc, jupiter):
        toolkit = TraderToolkit(rpc=rpc, jupiter=jupiter)
        result = toolkit.get_quote("SOL", USDC_MINT, 0.1)
        assert result.ok, result.error
        assert result.data["route"]
        assert result.data["priceImpact"].endswith("%")


class TestSolanaLive:

    def test_usdc_decimals(self, rpc):
        assert rpc.get_token_decimals(USDC_MINT) == 6

    def test_sol_balance(self, rpc):
        assert rpc.get_balance(USDC_HOLDER) >= 0

    def test_latest_blockhash(self, rpc):
        info = rpc.get_latest_blockhash()
        assert info.blockhash
        assert info.last_valid_block_height >= rpc.get_block_height()
