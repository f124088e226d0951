"""Exceptions raised by the Jira Cloud client.

Two families:
- `JiraValidationError` subclasses are raised *before* any I/O when a required
  identifier or payload is missing. Each one carries a fixed message so callers
  can match on the type.
- `JiraRequestError`, `JiraTransportError` and `JiraDecodeError` describe what
  went wrong once a request was sent. The first and last carry the response
  envelope so the raw body can be inspected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jira_cloud.core.domain.response import ResponseScheme


class JiraError(Exception):
    """Base exception for all Jira client errors."""


class JiraValidationError(JiraError, ValueError):
    """A required argument was not provided."""

    message = "invalid argument"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class JiraRequestError(JiraError):
    """The Jira API answered with a non-2xx status code."""

    def __init__(self, response: ResponseScheme) -> None:
        self.response = response
        self.status_code = response.code
        super().__init__(
            "request failed. Please analyze the request body for more details. "
            f"Status Code: {response.code}"
        )


class JiraTransportError(JiraError):
    """The request could not be delivered, or the client is already closed."""


class JiraDecodeError(JiraError):
    """The response body could not be decoded into the expected type."""

    def __init__(self, message: str, response: ResponseScheme | None = None) -> None:
        self.response = response
        super().__init__(message)


# Client construction

class NoSiteError(JiraValidationError):
    message = "no atlassian site set"


class InvalidAPIVersionError(JiraValidationError):
    message = "invalid api version, must be one of: 2, 3"


class NoPayloadError(JiraValidationError):
    message = "no payload set"


# Dashboards

class NoDashboardIDError(JiraValidationError):
    message = "no dashboard id set"


# Fields and field configurations

class NoFieldIDError(JiraValidationError):
    message = "no field id set"


class NoFieldConfigurationIDError(JiraValidationError):
    message = "no field configuration id set"


class NoFieldConfigurationNameError(JiraValidationError):
    message = "no field configuration name set"


class NoFieldConfigurationSchemeIDError(JiraValidationError):
    message = "no field configuration scheme id set"


class NoFieldConfigurationSchemeNameError(JiraValidationError):
    message = "no field configuration scheme name set"


class NoIssueTypesError(JiraValidationError):
    message = "no issue types id's set"


# Issues, links, priorities, resolutions

class NoIssueKeyOrIDError(JiraValidationError):
    message = "no issue key/id set"


class NoIssueLinkIDError(JiraValidationError):
    message = "no link id set"


class NoLinkTypeIDError(JiraValidationError):
    message = "no link type id set"


class NoPriorityIDError(JiraValidationError):
    message = "no priority id set"


class NoResolutionIDError(JiraValidationError):
    message = "no resolution id set"


# Permissions

class NoPermissionSchemeIDError(JiraValidationError):
    message = "no permission scheme id set"


class NoPermissionGrantIDError(JiraValidationError):
    message = "no permission grant id set"


class NoPermissionKeysError(JiraValidationError):
    message = "no permission keys set"


# Projects, roles, versions

class NoProjectIDError(JiraValidationError):
    message = "no project id set"


class NoProjectIDsError(JiraValidationError):
    message = "no project id's set"


class NoProjectIDOrKeyError(JiraValidationError):
    message = "no project id or key set"


class NoProjectRoleIDError(JiraValidationError):
    message = "no project role id set"


class NoProjectRoleNameError(JiraValidationError):
    message = "no project role name set"


class NoVersionIDError(JiraValidationError):
    message = "no version id set"


class NoVersionNameError(JiraValidationError):
    message = "no version name set"


# Screens

class NoScreenIDError(JiraValidationError):
    message = "no screen id set"


class NoScreenNameError(JiraValidationError):
    message = "no screen name set"


# Tasks, users, workflows

class NoTaskIDError(JiraValidationError):
    message = "no task id set"


class NoAccountIDError(JiraValidationError):
    message = "no account id set"


class NoAccountIDsError(JiraValidationError):
    message = "no account id's set"


class NoWorkflowIDError(JiraValidationError):
    message = "no workflow id set"


class NoWorkflowNameError(JiraValidationError):
    message = "no workflow name set"
