#!/usr/bin/env python3
"""
Example 04: Print the tool definitions an LLM agent receives.

Shows both Anthropic tool-use and OpenAI function-calling formats, then
dispatches one tool call the way an agent loop would.

Usage:
    python examples/04_anthropic_agent.py
"""

import json

from dex_trader.config import Settings
from dex_trader.tools import TraderToolkit

toolkit = TraderToolkit.from_settings(Settings.from_env())

print("=== Anthropic tools ===")
print(json.dumps(toolkit.to_anthropic_tools(), indent=2))

print("\n=== OpenAI tools ===")
for tool in toolkit.to_openai_tools():
    print(f"- {tool['function']['name']}: {tool['function']['description']}")

# An agent's tool_use block boils down to a name and an input dict
print("\n=== execute_tool('get_quote', ...) ===")
print(toolkit.execute_tool("get_quote", {
    "input_mint": "SOL",
    "output_mint": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    "amount": 0.5,
}))
