from typing import Any

from pydantic import BaseModel, Field


class ToolCallResponse(BaseModel):
    """Response model for a tool invocation."""

    status: str = Field(..., description="'success', 'partial' or 'error'")
    text: str = Field(..., description="Text payload, identical to the stdio transport's output")
    data: dict[str, Any] | None = Field(None, description="Structured result, when the tool produced one")
    error: str | None = Field(None, description="Error message for 'partial' and 'error' results")


class ToolDefinition(BaseModel):
    """Anthropic-format tool definition."""

    name: str
    description: str
    input_schema: dict[str, Any]
