"""
SolanaRPC: JSON-RPC client for a Solana cluster endpoint.

Covers what the trading tools need: balances, mint decimals, raw transaction
submission and confirmation polling.

Docs: https://solana.com/docs/rpc
"""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable
from typing import Any

import httpx
from solders.pubkey import Pubkey

from dex_trader.core.cache import DecimalsCache
from dex_trader.core.models import BlockhashInfo, TokenBalance
from dex_trader.core.units import from_raw_amount, lamports_to_sol

# Public mainnet endpoint, heavily rate limited
DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"

DEFAULT_COMMITMENT = "confirmed"

# Consecutive failed confirmation polls tolerated (~2 min at the default interval,
# longer than a blockhash stays valid)
MAX_POLL_FAILURES = 60

_COMMITMENT_RANK = {"processed": 0, "confirmed": 1, "finalized": 2}

logger = logging.getLogger("dex_trader.rpc")


class SolanaRPCError(Exception):
    """Raised when the RPC endpoint returns an error."""
    pass


class RPCTimeoutError(SolanaRPCError, TimeoutError):
    """Raised when an RPC request exceeds its deadline."""
    pass


class SubmissionError(SolanaRPCError):
    """Raised when the cluster rejects a transaction or it fails on-chain."""
    pass


class ConfirmationTimeoutError(SolanaRPCError):
    """Raised when a submitted transaction expires before reaching the target commitment."""
    pass


class SolanaRPC:
    """
    Synchronous JSON-RPC client for Solana.

    Usage:
        rpc = SolanaRPC()  # public mainnet endpoint
        rpc = SolanaRPC("https://my-node.example/rpc", decimals_cache=shared_cache)
    """

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        commitment: str = DEFAULT_COMMITMENT,
        timeout: float = 30.0,
        decimals_cache: DecimalsCache | None = None,
        poll_interval: float = 2.0,
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.rpc_url = rpc_url
        self.commitment = commitment
        self.poll_interval = poll_interval
        self.decimals_cache = decimals_cache if decimals_cache is not None else DecimalsCache()
        self._client = client or httpx.Client(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
        self._sleep = sleep
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Balances
    # ------------------------------------------------------------------

    def get_balance(self, address: str) -> int:
        """Return the lamport balance of an address."""
        result = self._call("getBalance", [address, {"commitment": self.commitment}])
        return int(result["value"])

    def get_sol_balance(self, address: str) -> float:
        """Return the SOL balance of an address in whole SOL."""
        return lamports_to_sol(self.get_balance(address))

    def get_token_balance(self, owner: str, mint: str) -> TokenBalance:
        """
        Return the owner's holdings of one SPL token.

        A wallet without a token account for the mint gets a zero snapshot,
        not an error. Multiple token accounts for the same mint are summed.

        Args:
            owner: wallet address
            mint: token mint address

        Returns:
            TokenBalance: raw amount, decimals and normalized amount
        """
        _validate_pubkey(mint, "mint")
        result = self._call(
            "getTokenAccountsByOwner",
            [
                owner,
                {"mint": mint},
                {"encoding": "jsonParsed", "commitment": self.commitment},
            ],
        )
        accounts = result.get("value") or []
        if not accounts:
            return TokenBalance.zero(mint)

        amounts = [
            acc["account"]["data"]["parsed"]["info"]["tokenAmount"] for acc in accounts
        ]
        decimals = int(amounts[0]["decimals"])
        raw = sum(int(a["amount"]) for a in amounts)
        self.decimals_cache.put(mint, decimals)
        return TokenBalance(
            mint=mint,
            amount=str(raw),
            decimals=decimals,
            ui_amount=from_raw_amount(raw, decimals),
        )

    def get_token_decimals(self, mint: str) -> int:
        """Return the decimals of a mint. Looked up once per mint, then cached."""
        cached = self.decimals_cache.get(mint)
        if cached is not None:
            return cached

        _validate_pubkey(mint, "mint")
        result = self._call(
            "getAccountInfo",
            [mint, {"encoding": "jsonParsed", "commitment": self.commitment}],
        )
        account = result.get("value")
        if account is None:
            raise SolanaRPCError(f"Mint account not found: {mint}")
        data = account.get("data")
        try:
            decimals = int(data["parsed"]["info"]["decimals"])
        except (KeyError, TypeError) as e:
            raise SolanaRPCError(f"Account {mint} is not a token mint") from e
        return self.decimals_cache.put(mint, decimals)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def send_raw_transaction(
        self,
        serialized_b64: str,
        skip_preflight: bool = True,
        max_retries: int = 3,
    ) -> str:
        """
        Broadcast a signed, base64-serialized transaction.

        Returns:
            str: transaction signature
        """
        try:
            result = self._call(
                "sendTransaction",
                [
                    serialized_b64,
                    {
                        "encoding": "base64",
                        "skipPreflight": skip_preflight,
                        "maxRetries": max_retries,
                    },
                ],
            )
        except RPCTimeoutError:
            raise
        except SolanaRPCError as e:
            raise SubmissionError(f"Transaction rejected: {e}") from e
        return str(result)

    def get_latest_blockhash(self, commitment: str | None = None) -> BlockhashInfo:
        result = self._call(
            "getLatestBlockhash", [{"commitment": commitment or self.commitment}]
        )
        return BlockhashInfo.model_validate(result["value"])

    def get_block_height(self, commitment: str | None = None) -> int:
        return int(self._call("getBlockHeight", [{"commitment": commitment or self.commitment}]))

    def get_signature_status(self, signature: str) -> dict[str, Any] | None:
        """Return the status of a signature, or None if the cluster has not seen it."""
        result = self._call(
            "getSignatureStatuses",
            [[signature], {"searchTransactionHistory": False}],
        )
        statuses = result.get("value") or [None]
        return statuses[0]

    def confirm_transaction(
        self,
        signature: str,
        blockhash: BlockhashInfo,
        commitment: str | None = None,
    ) -> None:
        """
        Block until the transaction reaches the commitment level.

        Polling stops when the cluster's block height passes the blockhash's
        last valid height, at which point the transaction can no longer land.
        Failed status or height polls are logged and retried.

        Raises:
            SubmissionError: the transaction landed with an error
            ConfirmationTimeoutError: the blockhash expired first
            SolanaRPCError: MAX_POLL_FAILURES polls in a row failed
        """
        target = commitment or self.commitment
        failures = 0
        while True:
            try:
                status = self.get_signature_status(signature)
                if status is not None:
                    if status.get("err"):
                        raise SubmissionError(f"Transaction {signature} failed: {status['err']}")
                    if _commitment_reached(status.get("confirmationStatus"), target):
                        logger.debug(f"Transaction {signature} reached {target}")
                        return
                height = self.get_block_height(target)
            except SubmissionError:
                raise
            except SolanaRPCError as e:
                # Already broadcast: retry the poll, the outcome is decided on-chain
                failures += 1
                if failures >= MAX_POLL_FAILURES:
                    raise
                logger.warning(f"Confirmation poll for {signature} failed ({failures}): {e}")
                self._sleep(self.poll_interval)
                continue

            failures = 0
            if height > blockhash.last_valid_block_height:
                raise ConfirmationTimeoutError(
                    f"Transaction {signature} was not confirmed before block height "
                    f"{blockhash.last_valid_block_height} (current {height})"
                )
            self._sleep(self.poll_interval)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _call(self, method: str, params: list[Any]) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        try:
            response = self._client.post(self.rpc_url, json=payload)
        except httpx.TimeoutException as e:
            raise RPCTimeoutError(f"RPC {method} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise SolanaRPCError(f"RPC {method} request failed: {e}") from e

        if response.status_code != 200:
            raise SolanaRPCError(f"RPC error {response.status_code} for {method}: {response.text}")
        try:
            data = response.json()
        except ValueError as e:
            raise SolanaRPCError(f"RPC {method} returned a non-JSON body: {response.text[:200]}") from e
        if "error" in data:
            err = data["error"]
            raise SolanaRPCError(f"RPC {method} failed ({err.get('code')}): {err.get('message')}")
        return data.get("result")

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> SolanaRPC:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


def _commitment_reached(actual: str | None, target: str) -> bool:
    if actual is None:
        return False
    return _COMMITMENT_RANK.get(actual, -1) >= _COMMITMENT_RANK.get(target, 1)


def _validate_pubkey(value: str, what: str) -> None:
    try:
        Pubkey.from_string(value)
    except ValueError as e:
        raise SolanaRPCError(f"Invalid {what} address: {value}") from e
