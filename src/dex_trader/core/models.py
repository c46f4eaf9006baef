"""
Core data models for Jupiter quotes and Solana balances.
Raw amounts are kept as the upstream strings; helpers expose them as ints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from dex_trader.core.units import SOL_DECIMALS, from_raw_amount

EXPLORER_TX_URL = "https://solscan.io/tx/{signature}"


def explorer_url(signature: str) -> str:
    return EXPLORER_TX_URL.format(signature=signature)


class _UpstreamModel(BaseModel):
    """Base for models parsed from Jupiter's camelCase JSON."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class SwapInfo(_UpstreamModel):
    """One venue hop inside a route."""
    amm_key: str = Field(alias="ammKey")
    label: str | None = None
    input_mint: str = Field(alias="inputMint")
    output_mint: str = Field(alias="outputMint")
    in_amount: str = Field(alias="inAmount")
    out_amount: str = Field(alias="outAmount")
    fee_amount: str | None = Field(default=None, alias="feeAmount")
    fee_mint: str | None = Field(default=None, alias="feeMint")


class RoutePlanStep(_UpstreamModel):
    swap_info: SwapInfo = Field(alias="swapInfo")
    percent: int | float

    def describe(self) -> str:
        label = self.swap_info.label or self.swap_info.amm_key[:8]
        return f"{label} ({self.percent:g}%)"


class JupiterQuote(_UpstreamModel):
    """A priced, unexecuted swap as returned by Jupiter's /quote endpoint."""
    input_mint: str = Field(alias="inputMint")
    in_amount: str = Field(alias="inAmount")
    output_mint: str = Field(alias="outputMint")
    out_amount: str = Field(alias="outAmount")
    other_amount_threshold: str = Field(alias="otherAmountThreshold")
    swap_mode: str = Field(default="ExactIn", alias="swapMode")
    slippage_bps: int = Field(alias="slippageBps")
    price_impact_pct: str = Field(default="0", alias="priceImpactPct")
    route_plan: list[RoutePlanStep] = Field(default_factory=list, alias="routePlan")
    context_slot: int | None = Field(default=None, alias="contextSlot")
    time_taken: float | None = Field(default=None, alias="timeTaken")

    _raw: dict[str, Any] | None = PrivateAttr(default=None)

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> JupiterQuote:
        """Parse a /quote response, keeping the original JSON for the swap request."""
        quote = cls.model_validate(data)
        quote._raw = data
        return quote

    @property
    def in_amount_raw(self) -> int:
        return int(self.in_amount)

    @property
    def out_amount_raw(self) -> int:
        return int(self.out_amount)

    @property
    def minimum_out_raw(self) -> int:
        return int(self.other_amount_threshold)

    def route_summary(self) -> str:
        """Venue labels with their share of volume, in route order."""
        return " → ".join(step.describe() for step in self.route_plan)

    def to_payload(self) -> dict[str, Any]:
        """Upstream JSON, unchanged, for the /swap request."""
        if self._raw is not None:
            return self._raw
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class TokenBalance(BaseModel):
    """Fungible token holdings of one wallet for one mint."""
    mint: str
    amount: str = "0"
    decimals: int = 0
    ui_amount: float = 0

    @classmethod
    def zero(cls, mint: str) -> TokenBalance:
        """Snapshot for a wallet with no token account for the mint."""
        return cls(mint=mint)

    @property
    def amount_raw(self) -> int:
        return int(self.amount)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mint": self.mint,
            "amount": self.amount,
            "decimals": self.decimals,
            "uiAmount": self.ui_amount,
        }


class Balance(BaseModel):
    """Point-in-time wallet holdings."""
    address: str
    lamports: int
    token: TokenBalance | None = None

    @property
    def sol(self) -> float:
        return from_raw_amount(self.lamports, SOL_DECIMALS)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"wallet": self.address, "solBalance": self.sol}
        if self.token is not None:
            result["tokenBalance"] = self.token.to_dict()
        return result


class BlockhashInfo(BaseModel):
    """Latest block reference used to bound confirmation polling."""
    blockhash: str
    last_valid_block_height: int = Field(alias="lastValidBlockHeight")

    model_config = ConfigDict(populate_by_name=True)
