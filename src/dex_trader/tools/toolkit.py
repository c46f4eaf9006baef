"""
TraderToolkit: the five trading operations exposed to AI agents.

Each operation validates its parameters, calls Jupiter and the Solana RPC in
a fixed order and returns a ToolResult. Nothing raises out of an operation:
every failure becomes an error result that the transport renders as text.

Usage:
    from dex_trader.config import Settings
    from dex_trader.tools import TraderToolkit

    toolkit = TraderToolkit.from_settings(Settings.from_env())
    print(toolkit.get_quote("SOL", usdc_mint, 0.5).to_text())

    # For LLM integration:
    tools = toolkit.to_anthropic_tools()
    text = toolkit.execute_tool("buy_and_sell", {"token_address": mint, "sol_amount": 0.1})
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from dex_trader.config import Settings
from dex_trader.core.cache import DecimalsCache
from dex_trader.core.models import Balance, explorer_url
from dex_trader.core.rpc import SolanaRPC, SolanaRPCError
from dex_trader.core.units import (
    SOL_DECIMALS,
    SOL_MINT,
    AmountError,
    from_raw_amount,
    resolve_mint,
    to_raw_amount,
)
from dex_trader.core.wallet import Wallet, WalletError
from dex_trader.defi.jupiter import DEFAULT_SLIPPAGE_BPS, JupiterClient, JupiterError
from dex_trader.tools.params import (
    TOOL_PARAMS,
    BuyAndSellParams,
    BuyTokenParams,
    GetBalanceParams,
    GetQuoteParams,
    SellTokenParams,
)
from dex_trader.tools.results import ToolResult

logger = logging.getLogger("dex_trader.toolkit")

# Failures that come from upstream services or configuration, not from bugs
_EXPECTED_ERRORS = (AmountError, JupiterError, SolanaRPCError, WalletError)


class TraderToolkit:
    """
    Solana trading toolkit backed by Jupiter.

    The wallet secret is held as configuration only; it is decoded into a
    keypair at the start of each wallet operation and dropped when the call
    returns. get_quote works without a secret.
    """

    def __init__(
        self,
        rpc: SolanaRPC,
        jupiter: JupiterClient,
        private_key: str | None = None,
    ) -> None:
        self._rpc = rpc
        self._jupiter = jupiter
        self._private_key = private_key
        self._handlers: dict[str, Callable[[Any], ToolResult]] = {
            "get_quote": self._get_quote,
            "buy_token": self._buy_token,
            "sell_token": self._sell_token,
            "buy_and_sell": self._buy_and_sell,
            "get_balance": self._get_balance,
        }

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        decimals_cache: DecimalsCache | None = None,
    ) -> TraderToolkit:
        rpc = SolanaRPC(settings.rpc_url, timeout=settings.timeout, decimals_cache=decimals_cache)
        jupiter = JupiterClient(settings.jupiter_api_url, timeout=settings.timeout)
        return cls(rpc, jupiter, private_key=settings.private_key)

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def get_quote(
        self,
        input_mint: str,
        output_mint: str,
        amount: float,
        input_decimals: int = SOL_DECIMALS,
        slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    ) -> ToolResult:
        """Preview a swap: amounts, minimum output, price impact and route."""
        return self.run_tool("get_quote", {
            "input_mint": input_mint,
            "output_mint": output_mint,
            "amount": amount,
            "input_decimals": input_decimals,
            "slippage_bps": slippage_bps,
        })

    def buy_token(
        self,
        token_address: str,
        sol_amount: float,
        slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    ) -> ToolResult:
        """Spend SOL to buy a token."""
        return self.run_tool("buy_token", {
            "token_address": token_address,
            "sol_amount": sol_amount,
            "slippage_bps": slippage_bps,
        })

    def sell_token(
        self,
        token_address: str,
        token_amount: float,
        token_decimals: int,
        slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    ) -> ToolResult:
        """Sell a token for SOL. The caller's token_decimals are trusted as given."""
        return self.run_tool("sell_token", {
            "token_address": token_address,
            "token_amount": token_amount,
            "token_decimals": token_decimals,
            "slippage_bps": slippage_bps,
        })

    def buy_and_sell(
        self,
        token_address: str,
        sol_amount: float,
        slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    ) -> ToolResult:
        """Buy a token with SOL, then immediately sell everything received."""
        return self.run_tool("buy_and_sell", {
            "token_address": token_address,
            "sol_amount": sol_amount,
            "slippage_bps": slippage_bps,
        })

    def get_balance(self, token_address: str | None = None) -> ToolResult:
        """Wallet SOL balance, plus one token balance when a mint is given."""
        params: dict[str, Any] = {}
        if token_address is not None:
            params["token_address"] = token_address
        return self.run_tool("get_balance", params)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def run_tool(self, tool_name: str, tool_input: dict[str, Any] | None) -> ToolResult:
        """
        Validate input and run a tool by name.

        Returns:
            ToolResult: never raises
        """
        handler = self._handlers.get(tool_name)
        if handler is None:
            return ToolResult.failure(f"Unknown tool: {tool_name}")

        try:
            params = TOOL_PARAMS[tool_name].model_validate(tool_input or {})
        except ValidationError as e:
            message = format_validation_error(e)
            logger.warning(f"Invalid parameters for {tool_name}: {message}")
            return ToolResult.failure(message)

        try:
            return handler(params)
        except _EXPECTED_ERRORS as e:
            logger.warning(f"Tool {tool_name} failed: {e}")
            return ToolResult.failure(str(e))
        except Exception as e:
            logger.exception(f"Tool {tool_name} failed unexpectedly")
            return ToolResult.failure(str(e) or type(e).__name__)

    def execute_tool(self, tool_name: str, tool_input: dict[str, Any] | None) -> str:
        """
        Execute a tool by name with given inputs.
        Used by LLM frameworks to dispatch tool calls.

        Returns:
            str: JSON-encoded result, or "Error: <message>"
        """
        return self.run_tool(tool_name, tool_input).to_text()

    # ------------------------------------------------------------------
    # Tool schema generators
    # ------------------------------------------------------------------

    def to_openai_tools(self) -> list[dict[str, Any]]:
        """Generate OpenAI function-calling tool definitions."""
        from dex_trader.tools.openai_tools import build_openai_tools
        return build_openai_tools(self)

    def to_anthropic_tools(self) -> list[dict[str, Any]]:
        """Generate Anthropic tool-use definitions."""
        from dex_trader.tools.anthropic_tools import build_anthropic_tools
        return build_anthropic_tools(self)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _wallet(self) -> Wallet:
        return Wallet.from_secret(self._private_key)

    def _get_quote(self, params: GetQuoteParams) -> ToolResult:
        input_mint = resolve_mint(params.input_mint)
        output_mint = resolve_mint(params.output_mint)
        raw_amount = to_raw_amount(params.amount, params.input_decimals)

        quote = self._jupiter.get_quote(input_mint, output_mint, raw_amount, params.slippage_bps)
        return ToolResult.success({
            "inputMint": quote.input_mint,
            "outputMint": quote.output_mint,
            "inputAmount": quote.in_amount,
            "outputAmount": quote.out_amount,
            "minimumOutputAmount": quote.other_amount_threshold,
            "priceImpact": f"{quote.price_impact_pct}%",
            "slippageBps": quote.slippage_bps,
            "route": quote.route_summary(),
        })

    def _buy_token(self, params: BuyTokenParams) -> ToolResult:
        wallet = self._wallet()
        token_mint = resolve_mint(params.token_address)
        raw_amount = to_raw_amount(params.sol_amount, SOL_DECIMALS)

        quote = self._jupiter.get_quote(SOL_MINT, token_mint, raw_amount, params.slippage_bps)
        signature = self._jupiter.execute_swap(quote, wallet, self._rpc)

        logger.info(f"Bought {quote.out_amount} raw units of {token_mint} for {params.sol_amount} SOL")
        return ToolResult.success({
            "status": "success",
            "transaction": signature,
            "solSpent": params.sol_amount,
            "tokenReceived": quote.out_amount,
            "tokenMint": token_mint,
            "explorer": explorer_url(signature),
        })

    def _sell_token(self, params: SellTokenParams) -> ToolResult:
        wallet = self._wallet()
        token_mint = resolve_mint(params.token_address)
        raw_amount = to_raw_amount(params.token_amount, params.token_decimals)

        quote = self._jupiter.get_quote(token_mint, SOL_MINT, raw_amount, params.slippage_bps)
        signature = self._jupiter.execute_swap(quote, wallet, self._rpc)
        sol_received = from_raw_amount(quote.out_amount, SOL_DECIMALS)

        logger.info(f"Sold {params.token_amount} of {token_mint} for {sol_received} SOL")
        return ToolResult.success({
            "status": "success",
            "transaction": signature,
            "tokenSold": params.token_amount,
            "tokenMint": token_mint,
            "solReceived": sol_received,
            "explorer": explorer_url(signature),
        })

    def _buy_and_sell(self, params: BuyAndSellParams) -> ToolResult:
        """
        Buy, then sell exactly what was bought.

        The two swaps are not transactional. If the sell leg fails after a
        confirmed buy, the result is "partial" and carries the buy details so
        the caller knows which position is left open.
        """
        wallet = self._wallet()
        token_mint = resolve_mint(params.token_address)

        # Buy leg
        try:
            raw_sol = to_raw_amount(params.sol_amount, SOL_DECIMALS)
            buy_quote = self._jupiter.get_quote(SOL_MINT, token_mint, raw_sol, params.slippage_bps)
            buy_tx = self._jupiter.execute_swap(buy_quote, wallet, self._rpc)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning(f"buy_and_sell: buy of {token_mint} failed: {message}")
            return ToolResult.failure(message, data={
                "status": "error",
                "phase": "buy",
                "error": message,
                "token_mint": token_mint,
            })
        token_received = buy_quote.out_amount

        # Sell leg: the exact raw amount received, no float round-trip
        try:
            token_decimals = self._rpc.get_token_decimals(token_mint)
            sell_quote = self._jupiter.get_quote(
                token_mint, SOL_MINT, buy_quote.out_amount_raw, params.slippage_bps
            )
            if sell_quote.input_mint != buy_quote.output_mint:
                raise JupiterError(
                    f"Sell quote input {sell_quote.input_mint} does not match "
                    f"bought mint {buy_quote.output_mint}"
                )
            sell_tx = self._jupiter.execute_swap(sell_quote, wallet, self._rpc)
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.error(
                f"buy_and_sell: bought {token_received} of {token_mint} (tx {buy_tx}) "
                f"but sell failed: {message}"
            )
            return ToolResult.partial({
                "status": "partial",
                "buy_transaction": buy_tx,
                "sol_spent": params.sol_amount,
                "token_received": token_received,
                "token_mint": token_mint,
                "sell_error": message,
                "explorer": explorer_url(buy_tx),
            }, error=message)

        token_sold = from_raw_amount(token_received, token_decimals)
        sol_received = from_raw_amount(sell_quote.out_amount, SOL_DECIMALS)
        net_sol = sol_received - params.sol_amount

        logger.info(f"buy_and_sell {token_mint}: spent {params.sol_amount} SOL, got back {sol_received} SOL")
        return ToolResult.success({
            "status": "success",
            "buy_transaction": buy_tx,
            "sell_transaction": sell_tx,
            "sol_spent": params.sol_amount,
            "token_received": token_received,
            "token_sold": token_sold,
            "sol_received": sol_received,
            "token_mint": token_mint,
            "net_sol": net_sol,
            "profit_sol": net_sol,
            "explorer_buy": explorer_url(buy_tx),
            "explorer_sell": explorer_url(sell_tx),
        })

    def _get_balance(self, params: GetBalanceParams) -> ToolResult:
        wallet = self._wallet()
        balance = Balance(address=wallet.address, lamports=self._rpc.get_balance(wallet.address))

        if params.token_address:
            token_mint = resolve_mint(params.token_address)
            balance.token = self._rpc.get_token_balance(wallet.address, token_mint)

        return ToolResult.success(balance.to_dict())


def format_validation_error(error: ValidationError) -> str:
    """One-line summary of a pydantic validation error."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "input"
        parts.append(f"{loc}: {err['msg']}")
    return "Invalid parameters: " + "; ".join(parts)
