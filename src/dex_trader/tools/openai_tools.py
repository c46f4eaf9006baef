"""OpenAI function-calling tool definitions for TraderToolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dex_trader.tools.params import TOOL_DESCRIPTIONS, input_schema

if TYPE_CHECKING:
    from dex_trader.tools.toolkit import TraderToolkit


def build_openai_tools(toolkit: TraderToolkit) -> list[dict[str, Any]]:
    """Return a list of OpenAI function-calling tool definitions."""
    return [
        {
            "type": "function",
            "function": {
                "name": name,
                "description": TOOL_DESCRIPTIONS[name],
                "parameters": input_schema(name),
            },
        }
        for name in toolkit.tool_names
    ]
