"""
Wallet: signing identity for swaps.

The keypair is decoded from a base58 secret and lives only in this object.
Tools build a fresh Wallet per call and drop it when the call ends; the
agent only ever sees the public address.
"""

from __future__ import annotations

import base64

import base58
from solders.keypair import Keypair
from solders.transaction import VersionedTransaction

SECRET_ENV_VAR = "SOLANA_PRIVATE_KEY"

_SECRET_KEY_LENGTH = 64


class WalletError(Exception):
    pass


class InvalidSecretError(WalletError):
    """Raised when the secret is not a base58-encoded 64-byte keypair."""
    pass


class Wallet:
    """
    Solana keypair wrapper.

    Usage:
        wallet = Wallet.from_secret(settings.private_key)
        signed = wallet.sign_transaction(swap_tx_b64)
    """

    def __init__(self, keypair: Keypair) -> None:
        self._keypair = keypair

    @classmethod
    def from_secret(cls, secret: str | None) -> Wallet:
        """
        Decode a base58 secret key (the 64-byte format exported by Phantom/solana-keygen).

        Raises:
            WalletError: no secret configured
            InvalidSecretError: not base58, or wrong length
        """
        if not secret:
            raise WalletError(
                f"{SECRET_ENV_VAR} environment variable is not set. "
                "Required for signing transactions."
            )
        try:
            raw = base58.b58decode(secret.strip())
        except ValueError as e:
            raise InvalidSecretError(
                f"Invalid {SECRET_ENV_VAR}. Must be a base58-encoded private key."
            ) from e
        if len(raw) != _SECRET_KEY_LENGTH:
            raise InvalidSecretError(
                f"Invalid {SECRET_ENV_VAR}. Expected {_SECRET_KEY_LENGTH} bytes, got {len(raw)}."
            )
        try:
            keypair = Keypair.from_bytes(raw)
        except ValueError as e:
            raise InvalidSecretError(
                f"Invalid {SECRET_ENV_VAR}. Bytes do not form a valid keypair."
            ) from e
        return cls(keypair)

    @property
    def address(self) -> str:
        return str(self._keypair.pubkey())

    def sign_transaction(self, serialized_b64: str) -> str:
        """
        Sign a base64-serialized versioned transaction.

        Returns:
            str: the signed transaction, base64-serialized
        """
        try:
            unsigned = VersionedTransaction.from_bytes(base64.b64decode(serialized_b64))
        except ValueError as e:
            raise WalletError(f"Cannot deserialize transaction: {e}") from e
        signed = VersionedTransaction(unsigned.message, [self._keypair])
        return base64.b64encode(bytes(signed)).decode("ascii")

    def __repr__(self) -> str:
        return f"Wallet(address={self.address!r})"
