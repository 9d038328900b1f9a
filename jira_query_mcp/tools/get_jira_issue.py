from typing import Any

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
    name="get_jira_issue",
    description="Get a specific Jira issue by key",
    inputSchema={
        "type": "object",
        "properties": {
            "issueKey": {
                "type": "string",
                "description": "The Jira issue key (e.g., PROJ-123)",
            },
        },
        "required": ["issueKey"],
    },
)


def project_issue(issue: dict[str, Any]) -> dict[str, Any]:
    fields = issue.get("fields") or {}

    attachments = []
    for attachment in fields.get("attachment") or []:
        attachments.append({
            "filename": attachment.get("filename"),
            "author": display_name(attachment.get("author"), UNKNOWN_USER),
            "created": attachment.get("created"),
            "size": attachment.get("size"),
            "mimeType": attachment.get("mimeType"),
            "content": attachment.get("content"),
        })

    comments = []
    for comment in (fields.get("comment") or {}).get("comments") or []:
        comments.append({
            "author": display_name(comment.get("author"), UNKNOWN_USER),
            "body": comment.get("body"),
            "created": comment.get("created"),
        })

    return {
        "key": issue.get("key"),
        "summary": fields.get("summary"),
        "description": fields.get("description"),
        "status": field_name(fields.get("status")),
        "assignee": display_name(fields.get("assignee"), UNASSIGNED),
        "priority": field_name(fields.get("priority"), NO_PRIORITY),
        "issueType": field_name(fields.get("issuetype")),
        "created": fields.get("created"),
        "updated": fields.get("updated"),
        "labels": fields.get("labels") or [],
        "attachments": attachments,
        "comments": comments,
    }


async def fetch_issue(context: JiraContext, issue_key: str) -> dict[str, Any]:
    issue = await context.get_json(f"issue/{issue_key}")
    return project_issue(issue)


async def handler(context: JiraContext, arguments: dict[str, Any]) -> dict[str, Any]:
    issue_key = arguments.get("issueKey")
    if not issue_key:
        raise ToolArgumentError("issueKey")
    return await fetch_issue(context, issue_key)
