"""Unit tests for Settings (environment configuration)."""

from dex_trader.config import Settings
from dex_trader.core.rpc import DEFAULT_RPC_URL
from dex_trader.defi.jupiter import JUPITER_API


def test_defaults():
    settings = Settings.from_env({})
    assert settings.private_key is None
    assert settings.rpc_url == DEFAULT_RPC_URL == "https://api.mainnet-beta.solana.com"
    assert settings.jupiter_api_url == JUPITER_API
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"
    assert not settings.has_wallet


def test_overrides():
    settings = Settings.from_env({
        "SOLANA_PRIVATE_KEY": "abc",
        "SOLANA_RPC_URL": "https://rpc.example",
        "JUPITER_API_URL": "https://jup.example/v6",
        "DEX_TRADER_TIMEOUT": "12.5",
        "DEX_TRADER_LOG_LEVEL": "debug",
    })
    assert settings.has_wallet
    assert settings.rpc_url == "https://rpc.example"
    assert settings.jupiter_api_url == "https://jup.example/v6"
    assert settings.timeout == 12.5
    assert settings.log_level == "DEBUG"


def test_empty_values_fall_back():
    settings = Settings.from_env({"SOLANA_PRIVATE_KEY": "", "SOLANA_RPC_URL": ""})
    assert settings.private_key is None
    assert settings.rpc_url == DEFAULT_RPC_URL


def test_secret_not_in_repr():
    settings = Settings.from_env({"SOLANA_PRIVATE_KEY": "supersecretvalue"})
    assert "supersecretvalue" not in repr(settings)
