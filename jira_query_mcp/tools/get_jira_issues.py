from typing import Any
from urllib.parse import quote

from mcp.types import Tool

from ..context import JiraContext
from ..errors import ToolArgumentError
from .projection import (
    NO_PRIORITY,
    UNASSIGNED,
    UNKNOWN_USER,
    display_name,
    field_name,
)


tool = Tool(
    name="get_jira_issues",
    description="Get Jira issues for a project, optionally filtered by a JQL fragment",
    inputSchema={
        "type": "object",
        "properties": {
            "projectKey": {
                "type": "string",
                "description": "The Jira project key (e.g., PROJ)",
            },
            "jql": {
                "type": "string",
                "description": "Optional JQL appended to the project filter (e.g., status = Open)",
            },
        },
        "required": ["projectKey"],
    },
)


def build_jql(project_key: str, jql: str | None = None) -> str:
    # Inputs are trusted; only the final string is URL-encoded.
    if jql:
        return f"project = {project_key} AND {jql}"
    return f"project = {project_key}"


def search_path(project_key: str, jql: str | None = None) -> str:
    return f"search?jql={quote(build_jql(project_key, jql), safe='')}"


def project_subtask(subtask: dict[str, Any]) -> dict[str, Any]:
    fields = subtask.get("fields") or {}
    return {
        "key": subtask.get("key"),
        "summary": fields.get("summary"),
        "status": field_name(fields.get("status")),
    }


def project_issue_summary(issue: dict[str, Any]) -> dict[str, Any]:
    fields = issue.get("fields") or {}
    return {
        "id": issue.get("id"),
        "key": issue.get("key"),
        "summary": fields.get("summary"),
        "description": fields.get("description"),
        "status": field_name(fields.get("status")),
        "assignee": display_name(fields.get("assignee"), UNASSIGNED),
        "reporter": display_name(fields.get("reporter"), UNKNOWN_USER),
        "priority": field_name(fields.get("priority"), NO_PRIORITY),
        "issueType": field_name(fields.get("issuetype")),
        "created": fields.get("created"),
        "updated": fields.get("updated"),
        "duedate": fields.get("duedate"),
        "labels": fields.get("labels") or [],
        "subtasks": [project_subtask(s) for s in fields.get("subtasks") or []],
    }


def project_search(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "total": data.get("total"),
        "startAt": data.get("startAt"),
        "maxResults": data.get("maxResults"),
        "issues": [project_issue_summary(i) for i in data.get("issues") or []],
    }


async def search_issues(
    context: JiraContext,
    project_key: str,
    jql: str | None = None,
) -> dict[str, Any]:
    data = await context.get_json(search_path(project_key, jql))
    return project_search(data)


async def handler(context: JiraContext, arguments: dict[str, Any]) -> dict[str, Any]:
    project_key = arguments.get("projectKey")
    if not project_key:
        raise ToolArgumentError("projectKey")
    return await search_issues(context, project_key, arguments.get("jql"))
