"""UI components for the CLI (Rich).

Kept apart from the commands so tables and panels can be reused and the
commands stay about fetching data.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jira_cloud.core.domain.models import (
    Dashboard,
    IssueField,
    Priority,
    Project,
    Resolution,
    ServerInformation,
    TaskDetail,
    Version,
)


def print_banner(console: Console, site: str) -> None:
    title = Text("jira-cloud", style="bold cyan")
    subtitle = Text(site or "no site configured", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _text(value: object) -> str:
    return "" if value is None else str(value)


def build_dashboards_table(dashboards: Iterable[Dashboard]) -> Table:
    table = Table(title="Dashboards")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Owner", style="magenta")
    table.add_column("Favourite", style="green")
    for dashboard in dashboards:
        owner = dashboard.owner.display_name if dashboard.owner else None
        table.add_row(
            _text(dashboard.id),
            _text(dashboard.name),
            _text(owner),
            "yes" if dashboard.is_favourite else "",
        )
    return table


def build_projects_table(projects: Iterable[Project]) -> Table:
    table = Table(title="Projects")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="white")
    table.add_column("Type", style="magenta")
    for project in projects:
        table.add_row(_text(project.key), _text(project.id), _text(project.name), _text(project.project_type_key))
    return table


def build_priorities_table(priorities: Iterable[Priority]) -> Table:
    table = Table(title="Priorities")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")
    for priority in priorities:
        table.add_row(_text(priority.id), _text(priority.name), _text(priority.description))
    return table


def build_resolutions_table(resolutions: Iterable[Resolution]) -> Table:
    table = Table(title="Resolutions")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")
    for resolution in resolutions:
        table.add_row(_text(resolution.id), _text(resolution.name), _text(resolution.description))
    return table


def build_fields_table(fields: Iterable[IssueField]) -> Table:
    table = Table(title="Fields")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Custom", style="green")
    table.add_column("Type", style="magenta")
    for field in fields:
        field_type = field.schema_.type if field.schema_ else None
        table.add_row(_text(field.id), _text(field.name), "yes" if field.custom else "", _text(field_type))
    return table


def build_roles_table(project: str, roles: Mapping[str, int]) -> Table:
    table = Table(title=f"Roles of {project}")
    table.add_column("Role", style="white")
    table.add_column("ID", style="cyan", no_wrap=True)
    for name, role_id in sorted(roles.items()):
        table.add_row(name, str(role_id))
    return table


def build_versions_table(project: str, versions: Iterable[Version]) -> Table:
    table = Table(title=f"Versions of {project}")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Released", style="green")
    table.add_column("Archived", style="yellow")
    table.add_column("Release date", style="dim")
    for version in versions:
        table.add_row(
            _text(version.id),
            _text(version.name),
            "yes" if version.released else "",
            "yes" if version.archived else "",
            _text(version.release_date),
        )
    return table


def build_task_panel(task: TaskDetail) -> Panel:
    body = Text()
    body.append(f"Status: {_text(task.status)}\n", style="bold")
    if task.progress is not None:
        body.append(f"Progress: {task.progress}%\n")
    if task.description:
        body.append(f"Description: {task.description}\n")
    if task.message:
        body.append(f"Message: {task.message}\n", style="dim")
    return Panel(body, title=Text(f"Task {_text(task.id)}", style="bold yellow"), border_style="yellow")


def build_server_panel(info: ServerInformation) -> Panel:
    body = Text()
    body.append(f"Base URL: {_text(info.base_url)}\n")
    body.append(f"Version: {_text(info.version)}\n")
    body.append(f"Deployment: {_text(info.deployment_type)}\n")
    body.append(f"Server title: {_text(info.server_title)}", style="dim")
    return Panel(body, title=Text("Server", style="bold cyan"), border_style="cyan")
