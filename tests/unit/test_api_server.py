import json
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from conftest import USDC_MINT, make_quote
from dex_trader.api.server import app
from dex_trader.defi.jupiter import UpstreamQuoteError
from dex_trader.tools.toolkit import TraderToolkit


@pytest.fixture
def jupiter():
    return MagicMock()


@pytest.fixture
def client(jupiter):
    # Inject a toolkit so startup does not build one from the environment
    app.state.toolkit = TraderToolkit(rpc=MagicMock(), jupiter=jupiter)
    with TestClient(app) as c:
        yield c
    app.state.toolkit = None


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_tools(client):
    response = client.get("/tools")
    assert response.status_code == 200
    names = [t["name"] for t in response.json()]
    assert names == ["get_quote", "buy_token", "sell_token", "buy_and_sell", "get_balance"]


def test_get_quote(client, jupiter):
    jupiter.get_quote.return_value = make_quote()
    response = client.post(
        "/tools/get_quote",
        json={"input_mint": "SOL", "output_mint": USDC_MINT, "amount": 0.5},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["outputAmount"] == "75000000"
    assert json.loads(body["text"]) == body["data"]
    assert body["error"] is None


def test_upstream_error_is_in_body(client, jupiter):
    jupiter.get_quote.side_effect = UpstreamQuoteError(429, "Rate limit exceeded")
    response = client.post(
        "/tools/get_quote",
        json={"input_mint": "SOL", "output_mint": USDC_MINT, "amount": 0.5},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "error"
    assert body["text"] == "Error: Jupiter quote failed (429): Rate limit exceeded"


def test_invalid_parameters_are_in_body(client, jupiter):
    response = client.post(
        "/tools/get_quote",
        json={"input_mint": "SOL", "output_mint": USDC_MINT, "amount": 0.5, "slippage_bps": 0},
    )
    assert response.status_code == 200
    assert response.json()["text"].startswith("Error: Invalid parameters:")
    jupiter.get_quote.assert_not_called()


def test_wallet_tool_without_secret(client):
    response = client.post("/tools/get_balance")
    assert response.status_code == 200
    assert response.json()["text"].startswith("Error: SOLANA_PRIVATE_KEY")


def test_unknown_tool(client):
    response = client.post("/tools/withdraw_everything", json={})
    assert response.status_code == 404
