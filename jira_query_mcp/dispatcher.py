"""Routes tool calls and turns every outcome into a CallToolResult.

Nothing raised by a handler escapes ``call_tool``: failures come back to the
host as ``Error: <message>`` text with ``isError`` set.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent

from .context import JiraContext
from .tools import TOOL_HANDLERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    value: Any


@dataclass(frozen=True)
class Failure:
    message: str


Outcome = Success | Failure


def _error_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


async def invoke(
    context: JiraContext,
    name: str,
    arguments: dict[str, Any] | None,
    handlers=None,
) -> Outcome:
    handlers = TOOL_HANDLERS if handlers is None else handlers
    handler = handlers.get(name)
    if handler is None:
        return Failure(f"Unknown tool: {name}")

    try:
        value = await handler(context, arguments or {})
    except Exception as e:
        logger.warning("Tool %s failed: %s", name, _error_message(e))
        return Failure(_error_message(e))
    return Success(value)


def to_envelope(outcome: Outcome) -> CallToolResult:
    """Wrap an outcome as a single text item.

    Only failures set ``isError``. The SDK model defaults the field to False,
    so successes still serialize ``"isError": false``.
    """
    if isinstance(outcome, Failure):
        return CallToolResult(
            content=[TextContent(type="text", text=f"Error: {outcome.message}")],
            isError=True,
        )
    text = json.dumps(outcome.value, indent=2, ensure_ascii=False)
    return CallToolResult(content=[TextContent(type="text", text=text)])


async def call_tool(
    context: JiraContext,
    name: str,
    arguments: dict[str, Any] | None,
) -> CallToolResult:
    return to_envelope(await invoke(context, name, arguments))
