"""tools module init"""
from dex_trader.tools.results import ToolResult
from dex_trader.tools.toolkit import TraderToolkit

__all__ = ["ToolResult", "TraderToolkit"]
