"""
JupiterClient: adapter for the Jupiter swap aggregator on Solana.

Jupiter routes a swap across every major Solana DEX and returns a ready-made
transaction for the best route. This adapter:
1. Requests quotes (route, amounts, minimum output)
2. Asks Jupiter to build the swap transaction for a quote
3. Signs it with the wallet, submits it and waits for confirmation

API: https://station.jup.ag/docs/apis/swap-api
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from dex_trader.core.models import JupiterQuote

if TYPE_CHECKING:
    from dex_trader.core.rpc import SolanaRPC
    from dex_trader.core.wallet import Wallet

JUPITER_API = "https://quote-api.jup.ag/v6"

DEFAULT_TIMEOUT = 30.0
DEFAULT_SLIPPAGE_BPS = 50

logger = logging.getLogger("dex_trader.jupiter")


class JupiterError(Exception):
    pass


class UpstreamQuoteError(JupiterError):
    """Jupiter answered the quote request with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Jupiter quote failed ({status_code}): {body}")


class UpstreamSwapBuildError(JupiterError):
    """Jupiter could not build the swap transaction."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Jupiter swap failed ({status_code}): {body}")


class JupiterTimeoutError(JupiterError, TimeoutError):
    pass


class JupiterClient:
    """
    Quote and execution client for Jupiter.

    Usage:
        jupiter = JupiterClient()
        quote = jupiter.get_quote(SOL_MINT, usdc_mint, 500_000_000, slippage_bps=50)
        print(quote.route_summary())
        signature = jupiter.execute_swap(quote, wallet, rpc)
    """

    def __init__(
        self,
        api_url: str = JUPITER_API,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self._api = api_url.rstrip("/")
        self.timeout = timeout
        self._http = client or httpx.Client(timeout=timeout)

    def get_quote(
        self,
        input_mint: str,
        output_mint: str,
        amount: int,
        slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    ) -> JupiterQuote:
        """
        Get the best-route quote for swapping a raw amount of input_mint.

        Args:
            input_mint: mint address of the token to sell
            output_mint: mint address of the token to buy
            amount: raw input amount in smallest units
            slippage_bps: slippage tolerance in basis points

        Returns:
            JupiterQuote: the full upstream quote, route in upstream order
        """
        params = {
            "inputMint": input_mint,
            "outputMint": output_mint,
            "amount": str(amount),
            "slippageBps": str(slippage_bps),
        }
        try:
            response = self._http.get(
                f"{self._api}/quote",
                params=params,
                headers={"accept": "application/json"},
            )
        except httpx.TimeoutException as e:
            raise JupiterTimeoutError(f"Jupiter quote timed out after {self.timeout:g}s") from e
        except httpx.HTTPError as e:
            raise JupiterError(f"Jupiter quote request failed: {e}") from e

        if not response.is_success:
            raise UpstreamQuoteError(response.status_code, response.text)
        try:
            quote = JupiterQuote.from_response(response.json())
        except ValueError as e:
            raise JupiterError(f"Jupiter quote returned an unreadable body: {response.text[:200]}") from e
        logger.debug(
            f"Quote {input_mint[:8]}.. -> {output_mint[:8]}..: "
            f"{quote.in_amount} -> {quote.out_amount} via {quote.route_summary()}"
        )
        return quote

    def build_swap_transaction(self, quote: JupiterQuote, user_public_key: str) -> str:
        """
        Ask Jupiter to build the swap transaction for a quote.

        SOL is wrapped/unwrapped automatically, the compute unit limit is sized
        dynamically and the priority fee is picked by Jupiter.

        Returns:
            str: base64-serialized unsigned versioned transaction
        """
        body = {
            "quoteResponse": quote.to_payload(),
            "userPublicKey": user_public_key,
            "wrapAndUnwrapSol": True,
            "dynamicComputeUnitLimit": True,
            "prioritizationFeeLamports": "auto",
        }
        try:
            response = self._http.post(
                f"{self._api}/swap",
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException as e:
            raise JupiterTimeoutError(f"Jupiter swap timed out after {self.timeout:g}s") from e
        except httpx.HTTPError as e:
            raise JupiterError(f"Jupiter swap request failed: {e}") from e

        if not response.is_success:
            raise UpstreamSwapBuildError(response.status_code, response.text)
        try:
            swap_tx = response.json().get("swapTransaction")
        except ValueError as e:
            raise UpstreamSwapBuildError(response.status_code, response.text) from e
        if not swap_tx:
            raise UpstreamSwapBuildError(response.status_code, response.text)
        return swap_tx

    def execute_swap(self, quote: JupiterQuote, wallet: Wallet, rpc: SolanaRPC) -> str:
        """
        Build, sign, submit and confirm a swap.

        Returns only once the transaction reaches "confirmed" commitment.
        A broadcast transaction cannot be withdrawn, so nothing here retries.

        Returns:
            str: transaction signature
        """
        swap_tx = self.build_swap_transaction(quote, wallet.address)
        signed = wallet.sign_transaction(swap_tx)

        signature = rpc.send_raw_transaction(signed, skip_preflight=True, max_retries=3)
        logger.info(f"Swap submitted: {quote.input_mint[:8]}.. -> {quote.output_mint[:8]}.. tx: {signature}")

        blockhash = rpc.get_latest_blockhash("confirmed")
        rpc.confirm_transaction(signature, blockhash, "confirmed")
        logger.info(f"Swap confirmed: {signature}")
        return signature

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> JupiterClient:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
