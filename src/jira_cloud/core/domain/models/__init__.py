"""Pydantic DTOs mirroring Jira's JSON resources.

One module per API area; everything is re-exported here so callers can do
`from jira_cloud.core.domain.models import Dashboard`.
"""

from jira_cloud.core.domain.models.base import AvatarURLs, JiraModel, PageScheme
from jira_cloud.core.domain.models.common import (
    Group,
    ProjectCategory,
    ProjectReference,
    Scope,
    TaskDetail,
    TaskScheme,
    User,
)
from jira_cloud.core.domain.models.dashboard import (
    Dashboard,
    DashboardPage,
    DashboardPayload,
    DashboardSearchOptions,
    DashboardSearchPage,
    SharePermission,
)
from jira_cloud.core.domain.models.field import (
    CustomFieldPayload,
    FieldConfiguration,
    FieldConfigurationIssueTypeItem,
    FieldConfigurationIssueTypeItemPage,
    FieldConfigurationItem,
    FieldConfigurationItemPage,
    FieldConfigurationItemPayload,
    FieldConfigurationPage,
    FieldConfigurationScheme,
    FieldConfigurationSchemeAssignPayload,
    FieldConfigurationSchemePage,
    FieldConfigurationSchemeProject,
    FieldConfigurationSchemeProjectPage,
    FieldConfigurationToIssueTypeMapping,
    FieldConfigurationToIssueTypeMappingPayload,
    FieldSchema,
    FieldSearchOptions,
    FieldSearchPage,
    IssueField,
)
from jira_cloud.core.domain.models.issue import (
    IssueLink,
    IssueLinkPage,
    IssueLinkType,
    IssueLinkTypeSearch,
    IssueTypeReference,
    LinkedIssue,
    LinkPayload,
    Priority,
    Resolution,
)
from jira_cloud.core.domain.models.permission import (
    BulkProjectPermissions,
    Permission,
    PermissionCheckPayload,
    PermissionGrant,
    PermissionGrantHolder,
    PermissionGrantPayload,
    PermissionGrants,
    PermissionPage,
    PermissionScheme,
    PermissionSchemeGrants,
    PermissionSchemePage,
    PermittedProject,
    PermittedProjects,
)
from jira_cloud.core.domain.models.project import (
    NewProjectCreated,
    Project,
    ProjectPayload,
    ProjectRole,
    ProjectRoleDetail,
    ProjectSearchOptions,
    ProjectSearchPage,
    ProjectStatusPage,
    ProjectUpdatePayload,
    Version,
    VersionIssueCounts,
    VersionPage,
    VersionPayload,
    VersionSearchOptions,
    VersionUnresolvedIssuesCount,
)
from jira_cloud.core.domain.models.screen import (
    AvailableScreenField,
    Screen,
    ScreenFieldPage,
    ScreenSearchOptions,
    ScreenSearchPage,
    ScreenWithTab,
)
from jira_cloud.core.domain.models.server import ServerInformation
from jira_cloud.core.domain.models.user import UserDetail, UserGroup, UserPayload, UserSearchPage
from jira_cloud.core.domain.models.workflow import (
    Workflow,
    WorkflowCondition,
    WorkflowCreated,
    WorkflowPage,
    WorkflowPayload,
    WorkflowSearchOptions,
    WorkflowTransition,
    WorkflowTransitionPayload,
    WorkflowTransitionRule,
    WorkflowTransitionRulesPayload,
    WorkflowTransitionScreen,
)

__all__ = [
    "AvailableScreenField",
    "AvatarURLs",
    "BulkProjectPermissions",
    "CustomFieldPayload",
    "Dashboard",
    "DashboardPage",
    "DashboardPayload",
    "DashboardSearchOptions",
    "DashboardSearchPage",
    "FieldConfiguration",
    "FieldConfigurationIssueTypeItem",
    "FieldConfigurationIssueTypeItemPage",
    "FieldConfigurationItem",
    "FieldConfigurationItemPage",
    "FieldConfigurationItemPayload",
    "FieldConfigurationPage",
    "FieldConfigurationScheme",
    "FieldConfigurationSchemeAssignPayload",
    "FieldConfigurationSchemePage",
    "FieldConfigurationSchemeProject",
    "FieldConfigurationSchemeProjectPage",
    "FieldConfigurationToIssueTypeMapping",
    "FieldConfigurationToIssueTypeMappingPayload",
    "FieldSchema",
    "FieldSearchOptions",
    "FieldSearchPage",
    "Group",
    "IssueField",
    "IssueLink",
    "IssueLinkPage",
    "IssueLinkType",
    "IssueLinkTypeSearch",
    "IssueTypeReference",
    "JiraModel",
    "LinkPayload",
    "LinkedIssue",
    "NewProjectCreated",
    "PageScheme",
    "Permission",
    "PermissionCheckPayload",
    "PermissionGrant",
    "PermissionGrantHolder",
    "PermissionGrantPayload",
    "PermissionGrants",
    "PermissionPage",
    "PermissionScheme",
    "PermissionSchemeGrants",
    "PermissionSchemePage",
    "PermittedProject",
    "PermittedProjects",
    "Priority",
    "Project",
    "ProjectCategory",
    "ProjectPayload",
    "ProjectReference",
    "ProjectRole",
    "ProjectRoleDetail",
    "ProjectSearchOptions",
    "ProjectSearchPage",
    "ProjectStatusPage",
    "ProjectUpdatePayload",
    "Resolution",
    "Scope",
    "Screen",
    "ScreenFieldPage",
    "ScreenSearchOptions",
    "ScreenSearchPage",
    "ScreenWithTab",
    "ServerInformation",
    "SharePermission",
    "TaskDetail",
    "TaskScheme",
    "User",
    "UserDetail",
    "UserGroup",
    "UserPayload",
    "UserSearchPage",
    "Version",
    "VersionIssueCounts",
    "VersionPage",
    "VersionPayload",
    "VersionSearchOptions",
    "VersionUnresolvedIssuesCount",
    "Workflow",
    "WorkflowCondition",
    "WorkflowCreated",
    "WorkflowPage",
    "WorkflowPayload",
    "WorkflowSearchOptions",
    "WorkflowTransition",
    "WorkflowTransitionPayload",
    "WorkflowTransitionRule",
    "WorkflowTransitionRulesPayload",
    "WorkflowTransitionScreen",
]
