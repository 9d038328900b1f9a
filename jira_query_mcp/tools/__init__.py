from mcp.types import Tool

from ..errors import RegistryError
from .get_jira_issue import tool as get_jira_issue_tool, handler as get_jira_issue_handler
from .get_jira_issues import tool as get_jira_issues_tool, handler as get_jira_issues_handler

ALL_TOOLS = [
    get_jira_issue_tool,
    get_jira_issues_tool,
]

TOOL_HANDLERS = {
    "get_jira_issue": get_jira_issue_handler,
    "get_jira_issues": get_jira_issues_handler,
}


def list_tools() -> list[Tool]:
    return list(ALL_TOOLS)


def check_registry(tools=None, handlers=None) -> None:
    """Fail if an advertised tool has no handler or a handler is not advertised."""
    tools = ALL_TOOLS if tools is None else tools
    handlers = TOOL_HANDLERS if handlers is None else handlers

    names = [t.name for t in tools]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise RegistryError(f"Duplicate tool names: {', '.join(duplicates)}")

    missing = sorted(set(names) - set(handlers))
    extra = sorted(set(handlers) - set(names))
    if missing or extra:
        raise RegistryError(
            f"Tool registry out of sync (no handler: {missing or 'none'}, not listed: {extra or 'none'})"
        )
