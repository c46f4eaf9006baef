"""
Declared parameter schemas for the trading tools.

Every tool call is validated against one of these models before any network
call is made. Mint fields accept the literal "SOL" for native SOL.

Each field type is an Annotated alias so the stdio server's tool signatures
carry exactly the same bounds and descriptions.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from dex_trader.core.units import MAX_DECIMALS, SOL_DECIMALS
from dex_trader.defi.jupiter import DEFAULT_SLIPPAGE_BPS

MIN_SLIPPAGE_BPS = 1
MAX_SLIPPAGE_BPS = 5000

SLIPPAGE_DESCRIPTION = "Slippage tolerance in basis points (default 50 = 0.5%)"


def _amount(description: str) -> Any:
    return Annotated[float, Field(gt=0, allow_inf_nan=False, description=description)]


def _decimals(description: str) -> Any:
    return Annotated[int, Field(ge=0, le=MAX_DECIMALS, description=description)]


def _mint(description: str) -> Any:
    return Annotated[str, Field(description=description)]


Slippage = Annotated[
    int, Field(ge=MIN_SLIPPAGE_BPS, le=MAX_SLIPPAGE_BPS, description=SLIPPAGE_DESCRIPTION)
]

InputMint = _mint("Input token mint address (use 'SOL' for native SOL)")
OutputMint = _mint("Output token mint address (use 'SOL' for native SOL)")
QuoteAmount = _amount("Amount of input token (in human-readable units, e.g. 0.5 SOL)")
InputDecimals = _decimals("Decimals of the input token (default 9 for SOL)")

BuyTokenAddress = _mint("Mint address of the token to buy")
BuySolAmount = _amount("Amount of SOL to spend (e.g. 0.1 for 0.1 SOL)")

SellTokenAddress = _mint("Mint address of the token to sell")
SellTokenAmount = _amount("Amount of tokens to sell (in human-readable units)")
SellTokenDecimals = _decimals(
    "Number of decimals for the token (e.g. 6 for USDC, 9 for most SPL tokens)"
)

TradeTokenAddress = _mint("Mint address of the token to trade")
TradeSolAmount = _amount("Amount of SOL to spend on the buy side")

BalanceTokenAddress = Annotated[
    str | None, Field(description="Optional: mint address of a token to check balance for")
]


class _ToolParams(BaseModel):
    model_config = ConfigDict(extra="forbid")


class GetQuoteParams(_ToolParams):
    input_mint: InputMint
    output_mint: OutputMint
    amount: QuoteAmount
    input_decimals: InputDecimals = SOL_DECIMALS
    slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS


class BuyTokenParams(_ToolParams):
    token_address: BuyTokenAddress
    sol_amount: BuySolAmount
    slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS


class SellTokenParams(_ToolParams):
    token_address: SellTokenAddress
    token_amount: SellTokenAmount
    token_decimals: SellTokenDecimals
    slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS


class BuyAndSellParams(_ToolParams):
    token_address: TradeTokenAddress
    sol_amount: TradeSolAmount
    slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS


class GetBalanceParams(_ToolParams):
    token_address: BalanceTokenAddress = None


TOOL_PARAMS: dict[str, type[_ToolParams]] = {
    "get_quote": GetQuoteParams,
    "buy_token": BuyTokenParams,
    "sell_token": SellTokenParams,
    "buy_and_sell": BuyAndSellParams,
    "get_balance": GetBalanceParams,
}

TOOL_DESCRIPTIONS: dict[str, str] = {
    "get_quote": (
        "Get a swap quote from Jupiter aggregator. "
        "Preview price, output amount, and route without executing a trade."
    ),
    "buy_token": (
        "Buy a Solana token by spending SOL. "
        "Uses Jupiter aggregator for best price across all DEXs."
    ),
    "sell_token": (
        "Sell a Solana token for SOL. "
        "Uses Jupiter aggregator for best price across all DEXs."
    ),
    "buy_and_sell": (
        "Atomically buy a token and immediately sell it back for SOL. "
        "Executes both swaps back-to-back for tightest execution. "
        "Returns partial result if buy succeeds but sell fails."
    ),
    "get_balance": "Get wallet SOL balance and optionally a specific token balance.",
}


def input_schema(tool_name: str) -> dict[str, Any]:
    """JSON schema of a tool's parameters, without pydantic's title noise."""
    schema = TOOL_PARAMS[tool_name].model_json_schema()
    schema.pop("title", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    schema.setdefault("required", [])
    return schema
