"""
Process configuration, read once at startup.

Values come from the environment, optionally seeded from a .env file in the
working directory.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from dotenv import load_dotenv

from dex_trader.core.rpc import DEFAULT_RPC_URL
from dex_trader.defi.jupiter import DEFAULT_TIMEOUT, JUPITER_API

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """
    Configuration for the trading tools.

    Args:
        private_key:      base58 secret key; only wallet operations need it
        rpc_url:          Solana JSON-RPC endpoint
        jupiter_api_url:  Jupiter swap API base URL
        timeout:          HTTP deadline in seconds for quote/build/RPC requests
        log_level:        logging level name
    """
    private_key: str | None = field(default=None, repr=False)
    rpc_url: str = DEFAULT_RPC_URL
    jupiter_api_url: str = JUPITER_API
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, dotenv: bool = True) -> Settings:
        """Build settings from the environment (and .env unless disabled)."""
        if environ is None:
            if dotenv:
                load_dotenv()
            environ = os.environ
        timeout = environ.get("DEX_TRADER_TIMEOUT")
        return cls(
            private_key=environ.get("SOLANA_PRIVATE_KEY") or None,
            rpc_url=environ.get("SOLANA_RPC_URL") or DEFAULT_RPC_URL,
            jupiter_api_url=environ.get("JUPITER_API_URL") or JUPITER_API,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            log_level=(environ.get("DEX_TRADER_LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def has_wallet(self) -> bool:
        return bool(self.private_key)


def configure_logging(level: str = "INFO") -> None:
    """Send logs to stderr; stdout belongs to the tool transport."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
