"""
Stdio tool server (Model Context Protocol).

Exposes the five trading tools to any MCP client. Every tool answers with a
single text payload: JSON on success, or "Error: <message>".

Run:
    dex-trader            # console script
    python -m dex_trader
"""

import logging

from mcp.server.fastmcp import FastMCP

from dex_trader import __version__
from dex_trader.config import Settings, configure_logging
from dex_trader.core.units import SOL_DECIMALS
from dex_trader.tools.params import (
    DEFAULT_SLIPPAGE_BPS,
    TOOL_DESCRIPTIONS,
    BalanceTokenAddress,
    BuySolAmount,
    BuyTokenAddress,
    InputDecimals,
    InputMint,
    OutputMint,
    QuoteAmount,
    SellTokenAddress,
    SellTokenAmount,
    SellTokenDecimals,
    Slippage,
    TradeSolAmount,
    TradeTokenAddress,
)
from dex_trader.tools.toolkit import TraderToolkit

SERVER_NAME = "dex-trader"

logger = logging.getLogger("dex_trader.server")


def create_server(toolkit: TraderToolkit) -> FastMCP:
    """Register the toolkit's operations as MCP tools."""
    server = FastMCP(SERVER_NAME)

    @server.tool(name="get_quote", description=TOOL_DESCRIPTIONS["get_quote"])
    def get_quote(
        input_mint: InputMint,
        output_mint: OutputMint,
        amount: QuoteAmount,
        input_decimals: InputDecimals = SOL_DECIMALS,
        slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS,
    ) -> str:
        return toolkit.get_quote(input_mint, output_mint, amount, input_decimals, slippage_bps).to_text()

    @server.tool(name="buy_token", description=TOOL_DESCRIPTIONS["buy_token"])
    def buy_token(
        token_address: BuyTokenAddress,
        sol_amount: BuySolAmount,
        slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS,
    ) -> str:
        return toolkit.buy_token(token_address, sol_amount, slippage_bps).to_text()

    @server.tool(name="sell_token", description=TOOL_DESCRIPTIONS["sell_token"])
    def sell_token(
        token_address: SellTokenAddress,
        token_amount: SellTokenAmount,
        token_decimals: SellTokenDecimals,
        slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS,
    ) -> str:
        return toolkit.sell_token(token_address, token_amount, token_decimals, slippage_bps).to_text()

    @server.tool(name="buy_and_sell", description=TOOL_DESCRIPTIONS["buy_and_sell"])
    def buy_and_sell(
        token_address: TradeTokenAddress,
        sol_amount: TradeSolAmount,
        slippage_bps: Slippage = DEFAULT_SLIPPAGE_BPS,
    ) -> str:
        return toolkit.buy_and_sell(token_address, sol_amount, slippage_bps).to_text()

    @server.tool(name="get_balance", description=TOOL_DESCRIPTIONS["get_balance"])
    def get_balance(token_address: BalanceTokenAddress = None) -> str:
        return toolkit.get_balance(token_address).to_text()

    return server


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    if not settings.has_wallet:
        logger.warning("SOLANA_PRIVATE_KEY not set: only get_quote will work.")

    toolkit = TraderToolkit.from_settings(settings)
    server = create_server(toolkit)
    logger.info(f"{SERVER_NAME} {__version__} listening on stdio (rpc: {settings.rpc_url})")
    server.run()


if __name__ == "__main__":
    main()
