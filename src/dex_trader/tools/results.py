"""Tagged result returned by every trading tool."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

SUCCESS = "success"
PARTIAL = "partial"
ERROR = "error"


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of one tool call.

    status is "success", "partial" (buy_and_sell bought but could not sell)
    or "error". data holds the structured payload when there is one; an error
    without data renders as the plain "Error: <message>" text.
    """
    status: str
    data: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def success(cls, data: dict[str, Any]) -> ToolResult:
        return cls(status=SUCCESS, data=data)

    @classmethod
    def partial(cls, data: dict[str, Any], error: str) -> ToolResult:
        return cls(status=PARTIAL, data=data, error=error)

    @classmethod
    def failure(cls, error: str, data: dict[str, Any] | None = None) -> ToolResult:
        return cls(status=ERROR, data=data, error=error)

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS

    def to_text(self) -> str:
        """Render for a text-only transport."""
        if self.data is not None:
            return json.dumps(self.data, indent=2)
        return f"Error: {self.error}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "text": self.to_text(),
            "data": self.data,
            "error": self.error,
        }
