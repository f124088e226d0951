"""`jira-cloud` command line entry point."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer
from pydantic import ValidationError

from jira_cloud.adapters.jira_client import JiraClient
from jira_cloud.cli import doctor, ui_components
from jira_cloud.cli.display import configure_logging, console
from jira_cloud.core.config import JiraSettings
from jira_cloud.core.domain.errors import JiraError, JiraRequestError
from jira_cloud.core.domain.models import ProjectSearchOptions

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Query a Jira Cloud site from the terminal.")


def build_client(settings: JiraSettings) -> JiraClient:
    """Client used by every command; tests replace it to inject a transport."""

    return JiraClient.from_settings(settings)


def _settings(ctx: typer.Context) -> JiraSettings:
    return ctx.obj["settings"]


def _with_client(ctx: typer.Context, action: Callable[[JiraClient], Awaitable[T]]) -> T:
    """Run `action` against a fresh client, turning client errors into exit code 1."""

    settings = _settings(ctx)

    async def _run() -> T:
        async with build_client(settings) as client:
            return await action(client)

    try:
        return asyncio.run(_run())
    except JiraRequestError as exc:
        console.print(f"[red]{exc}[/red]")
        if exc.response.text:
            console.print(exc.response.text, style="dim", markup=False)
        raise typer.Exit(code=1) from exc
    except JiraError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."),
    api_version: str | None = typer.Option(None, "--api-version", help="REST API version (2 or 3)."),
) -> None:
    overrides: dict[str, Any] = {}
    if log_level:
        overrides["log_level"] = log_level
    if api_version:
        overrides["api_version"] = api_version
    try:
        settings = JiraSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(settings.log_level, settings.log_file)
    ctx.obj = {"settings": settings}


@app.command("setup")
def setup_command() -> None:
    """Store site and credentials in the user config `.env`."""

    doctor.setup()


@app.command("doctor")
def doctor_command(ctx: typer.Context) -> None:
    """Show the configuration and check that the site answers."""

    settings = _settings(ctx)
    ui_components.print_banner(console, settings.site)
    if not doctor.run(settings, build_client):
        raise typer.Exit(code=1)


@app.command("dashboards")
def dashboards_command(
    ctx: typer.Context,
    filter: str = typer.Option("", "--filter", help="`favourite` or `my`."),
    start_at: int = typer.Option(0, "--start-at"),
    max_results: int = typer.Option(50, "--max-results"),
) -> None:
    """List dashboards."""

    page, _ = _with_client(ctx, lambda client: client.dashboard.gets(start_at, max_results, filter))
    console.print(ui_components.build_dashboards_table(page.dashboards))


@app.command("projects")
def projects_command(
    ctx: typer.Context,
    query: str = typer.Option("", "--query", help="Match on project key or name."),
    start_at: int = typer.Option(0, "--start-at"),
    max_results: int = typer.Option(50, "--max-results"),
) -> None:
    """Search projects."""

    options = ProjectSearchOptions(query=query) if query else None
    page, _ = _with_client(ctx, lambda client: client.project.search(options, start_at, max_results))
    console.print(ui_components.build_projects_table(page.values))


@app.command("priorities")
def priorities_command(ctx: typer.Context) -> None:
    """List issue priorities."""

    priorities, _ = _with_client(ctx, lambda client: client.issue.priority.gets())
    console.print(ui_components.build_priorities_table(priorities))


@app.command("resolutions")
def resolutions_command(ctx: typer.Context) -> None:
    """List issue resolutions."""

    resolutions, _ = _with_client(ctx, lambda client: client.issue.resolution.gets())
    console.print(ui_components.build_resolutions_table(resolutions))


@app.command("fields")
def fields_command(
    ctx: typer.Context,
    custom_only: bool = typer.Option(False, "--custom", help="Only custom fields."),
) -> None:
    """List issue fields."""

    fields, _ = _with_client(ctx, lambda client: client.issue.field.gets())
    if custom_only:
        fields = [field for field in fields if field.custom]
    console.print(ui_components.build_fields_table(fields))


@app.command("roles")
def roles_command(ctx: typer.Context, project: str = typer.Argument(..., help="Project key or ID.")) -> None:
    """Show role name -> role ID for a project."""

    roles, _ = _with_client(ctx, lambda client: client.project.role.gets(project))
    console.print(ui_components.build_roles_table(project, roles))


@app.command("versions")
def versions_command(ctx: typer.Context, project: str = typer.Argument(..., help="Project key or ID.")) -> None:
    """List the versions of a project."""

    versions, _ = _with_client(ctx, lambda client: client.project.version.gets(project))
    console.print(ui_components.build_versions_table(project, versions))


@app.command("server")
def server_command(ctx: typer.Context) -> None:
    """Show the server information of the site."""

    info, _ = _with_client(ctx, lambda client: client.server.info())
    console.print(ui_components.build_server_panel(info))


@app.command("task")
def task_command(ctx: typer.Context, task_id: str = typer.Argument(..., help="Asynchronous task ID.")) -> None:
    """Show the status of an asynchronous task."""

    task, _ = _with_client(ctx, lambda client: client.task.get(task_id))
    console.print(ui_components.build_task_panel(task))


def run() -> None:
    app()
