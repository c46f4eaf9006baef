"""Anthropic tool-use definitions for TraderToolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dex_trader.tools.params import TOOL_DESCRIPTIONS, input_schema

if TYPE_CHECKING:
    from dex_trader.tools.toolkit import TraderToolkit


def build_anthropic_tools(toolkit: TraderToolkit) -> list[dict[str, Any]]:
    """Return a list of Anthropic tool-use definitions."""
    return [
        {
            "name": name,
            "description": TOOL_DESCRIPTIONS[name],
            "input_schema": input_schema(name),
        }
        for name in toolkit.tool_names
    ]
