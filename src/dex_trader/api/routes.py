from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from dex_trader.api.models import ToolCallResponse, ToolDefinition

router = APIRouter(tags=["Trading Tools"])


def get_toolkit(request: Request):
    """Dependency to retrieve the initialized TraderToolkit from app state."""
    toolkit = getattr(request.app.state, "toolkit", None)
    if not toolkit:
        raise HTTPException(status_code=500, detail="trader toolkit not initialized")
    return toolkit


@router.get("/tools", response_model=list[ToolDefinition])
async def list_tools(request: Request):
    """List the available tools and their parameter schemas."""
    toolkit = get_toolkit(request)
    return toolkit.to_anthropic_tools()


@router.post("/tools/{tool_name}", response_model=ToolCallResponse)
def call_tool(request: Request, tool_name: str, tool_input: dict[str, Any] | None = Body(default=None)):
    """
    Run one tool.

    Business failures are reported in the body with status 'error' or
    'partial', never as HTTP errors. Only unknown tool names return 404.
    """
    toolkit = get_toolkit(request)
    if tool_name not in toolkit.tool_names:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")

    result = toolkit.run_tool(tool_name, tool_input)
    return ToolCallResponse(**result.to_dict())
