"""
API module for dex-trader.

Provides a FastAPI app exposing the trading tools over HTTP.
"""

from dex_trader.api.models import ToolCallResponse, ToolDefinition

__all__ = [
    "ToolCallResponse",
    "ToolDefinition",
]
