"""Doctor and setup commands: configuration checks and interactive setup."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import typer
from rich.table import Table

from jira_cloud.adapters.jira_client import JiraClient
from jira_cloud.cli.display import console
from jira_cloud.core.config import JiraSettings, get_user_env_file, write_user_env_vars
from jira_cloud.core.domain.errors import JiraError


async def _check_server(client: JiraClient) -> tuple[bool, str]:
    try:
        async with client:
            info, response = await client.server.info()
        return True, f"HTTP {response.code} · {info.deployment_type or 'unknown'} {info.version or ''}".strip()
    except JiraError as exc:
        return False, str(exc)


def run(settings: JiraSettings, client_factory: Callable[[JiraSettings], JiraClient]) -> bool:
    """Show the effective configuration and call `serverInfo`.

    Returns whether every required check passed.
    """

    table = Table(title="jira-cloud doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok = True

    if settings.site:
        table.add_row("Site", "OK", settings.site)
    else:
        table.add_row("Site", "FAIL", "JIRA_CLOUD_SITE is not set; run `jira-cloud setup`")
        ok = False

    if settings.has_bearer_token:
        table.add_row("Auth", "OK", "Bearer token")
    elif settings.has_basic_auth:
        table.add_row("Auth", "OK", f"Basic ({settings.mail})")
    else:
        table.add_row("Auth", "OPTIONAL", "No credentials -> anonymous access only")

    table.add_row("API version", "OK", settings.api_version)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "MISSING", str(get_user_env_file()))

    if settings.site:
        ok_server, detail = asyncio.run(_check_server(client_factory(settings)))
        table.add_row("serverInfo", "OK" if ok_server else "FAIL", detail)
        ok = ok and ok_server

    console.print(table)
    return ok


def setup() -> None:
    """Interactive setup: stores site and credentials in the user `.env`."""

    site = typer.prompt("Atlassian site (https://your-domain.atlassian.net)").strip()
    mail = typer.prompt("Account e-mail", default="", show_default=False).strip()
    token = typer.prompt("API token", default="", hide_input=True, show_default=False).strip()
    api_version = typer.prompt("REST API version", default="3", show_default=True).strip()

    if not site:
        raise typer.BadParameter("site is required")
    if api_version not in ("2", "3"):
        raise typer.BadParameter("api version must be 2 or 3")

    env_path = write_user_env_vars(
        {
            "JIRA_CLOUD_SITE": site,
            "JIRA_CLOUD_MAIL": mail or None,
            "JIRA_CLOUD_TOKEN": token or None,
            "JIRA_CLOUD_API_VERSION": api_version,
        }
    )

    console.print(f"[green]Saved Jira config to:[/green] {env_path}")
