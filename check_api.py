"""Manual script to verify Jira API connectivity.

Usage: python check_api.py PROJ-123 [PROJECT_KEY]
"""

import asyncio
import json
import sys

import httpx

from jira_query_mcp.config import Settings
from jira_query_mcp.context import JiraContext
from jira_query_mcp.errors import ConfigurationError, HttpError
from jira_query_mcp.tools.get_jira_issue import fetch_issue
from jira_query_mcp.tools.get_jira_issues import search_issues


async def check_connection(issue_key: str, project_key: str | None = None):
    settings = Settings.from_env()

    print("=" * 50)
    print("Testing: Get Jira Issue")
    print("=" * 50)
    print(f"Host: {settings.jira_host}")
    print(f"API version: {settings.api_version}")
    print(f"Proxy: {settings.proxy_url or 'none'}")
    print()

    if not all([settings.jira_host, settings.api_token]):
        print("ERROR: Missing required environment variables.")
        print("Make sure JIRA_HOST and JIRA_API_TOKEN are set in .env")
        return 1

    try:
        context = JiraContext.from_settings(settings)
    except ConfigurationError as e:
        print(f"ERROR: {e}")
        return 1

    try:
        issue = await fetch_issue(context, issue_key)
        print(f"SUCCESS: [{issue['key']}] {issue['summary']}")
        print(f"    Status: {issue['status']} | Assignee: {issue['assignee']}")
        print()

        if project_key:
            result = await search_issues(context, project_key)
            print(f"SUCCESS: {result['total']} issue(s) in {project_key}")
            print(json.dumps([i["key"] for i in result["issues"]], indent=2))
    except HttpError as e:
        print(f"ERROR: API returned {e}")
        return 1
    except httpx.ConnectError as e:
        print(f"ERROR: Could not connect to Jira host: {e}")
        return 1
    finally:
        await context.aclose()
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)
    sys.exit(asyncio.run(check_connection(*sys.argv[1:3])))
