"""REST services (one module per API area).

Each service receives the shared client (`core.interfaces.JiraConnector`) and
exposes one coroutine per endpoint.
"""

from jira_cloud.adapters.services.dashboard import DashboardService
from jira_cloud.adapters.services.field import FieldService
from jira_cloud.adapters.services.field_configuration import (
    FieldConfigurationItemService,
    FieldConfigurationSchemeService,
    FieldConfigurationService,
)
from jira_cloud.adapters.services.issue import IssueService
from jira_cloud.adapters.services.issue_link import IssueLinkService, IssueLinkTypeService
from jira_cloud.adapters.services.permission import (
    PermissionSchemeGrantService,
    PermissionSchemeService,
    PermissionService,
)
from jira_cloud.adapters.services.priority import PriorityService
from jira_cloud.adapters.services.project import ProjectService
from jira_cloud.adapters.services.project_role import ProjectRoleService, extract_role_ids
from jira_cloud.adapters.services.project_version import ProjectVersionService
from jira_cloud.adapters.services.resolution import ResolutionService
from jira_cloud.adapters.services.screen import ScreenService
from jira_cloud.adapters.services.server import ServerService
from jira_cloud.adapters.services.task import TaskService
from jira_cloud.adapters.services.user import UserService
from jira_cloud.adapters.services.workflow import WorkflowService

__all__ = [
    "DashboardService",
    "FieldConfigurationItemService",
    "FieldConfigurationSchemeService",
    "FieldConfigurationService",
    "FieldService",
    "IssueLinkService",
    "IssueLinkTypeService",
    "IssueService",
    "PermissionSchemeGrantService",
    "PermissionSchemeService",
    "PermissionService",
    "PriorityService",
    "ProjectRoleService",
    "ProjectService",
    "ProjectVersionService",
    "ResolutionService",
    "ScreenService",
    "ServerService",
    "TaskService",
    "UserService",
    "WorkflowService",
    "extract_role_ids",
]
