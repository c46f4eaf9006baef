"""Unit tests for OpenAI/Anthropic tool schema structure."""

from unittest.mock import MagicMock

from dex_trader.tools.params import MAX_SLIPPAGE_BPS, MIN_SLIPPAGE_BPS, input_schema
from dex_trader.tools.toolkit import TraderToolkit

TOOL_NAMES = {"get_quote", "buy_token", "sell_token", "buy_and_sell", "get_balance"}


def make_toolkit():
    """Build a toolkit with mocked dependencies."""
    return TraderToolkit(rpc=MagicMock(), jupiter=MagicMock())


def test_openai_tools_format():
    tools = make_toolkit().to_openai_tools()
    assert len(tools) == 5
    for tool in tools:
        assert tool["type"] == "function"
        assert "name" in tool["function"]
        assert "description" in tool["function"]
        assert tool["function"]["parameters"]["type"] == "object"


def test_anthropic_tools_format():
    tools = make_toolkit().to_anthropic_tools()
    assert len(tools) == 5
    for tool in tools:
        assert "name" in tool
        assert tool["description"]
        assert tool["input_schema"]["type"] == "object"


def test_tool_names():
    openai_names = {t["function"]["name"] for t in make_toolkit().to_openai_tools()}
    anthropic_names = {t["name"] for t in make_toolkit().to_anthropic_tools()}
    assert openai_names == anthropic_names == TOOL_NAMES


def test_required_parameters():
    assert set(input_schema("get_quote")["required"]) == {"input_mint", "output_mint", "amount"}
    assert set(input_schema("buy_token")["required"]) == {"token_address", "sol_amount"}
    assert set(input_schema("sell_token")["required"]) == {"token_address", "token_amount", "token_decimals"}
    assert set(input_schema("buy_and_sell")["required"]) == {"token_address", "sol_amount"}
    assert input_schema("get_balance")["required"] == []


def test_slippage_bounds_and_default():
    for name in ("get_quote", "buy_token", "sell_token", "buy_and_sell"):
        slippage = input_schema(name)["properties"]["slippage_bps"]
        assert slippage["minimum"] == MIN_SLIPPAGE_BPS
        assert slippage["maximum"] == MAX_SLIPPAGE_BPS
        assert slippage["default"] == 50


def test_decimals_bounds():
    decimals = input_schema("get_quote")["properties"]["input_decimals"]
    assert decimals["default"] == 9
    assert decimals["minimum"] == 0
    assert decimals["maximum"] == 18
    assert input_schema("sell_token")["properties"]["token_decimals"]["maximum"] == 18


def test_amounts_must_be_positive():
    assert input_schema("get_quote")["properties"]["amount"]["exclusiveMinimum"] == 0
    assert input_schema("buy_token")["properties"]["sol_amount"]["exclusiveMinimum"] == 0


def test_no_pydantic_titles():
    for name in TOOL_NAMES:
        schema = input_schema(name)
        assert "title" not in schema
        for prop in schema["properties"].values():
            assert "title" not in prop
            assert prop.get("description")
