"""Async client for the Jira Cloud REST API (v2 and v3)."""

from jira_cloud.adapters.jira_client import AuthenticationService, JiraClient
from jira_cloud.adapters.query import encode_params
from jira_cloud.adapters.services.project_role import extract_role_ids
from jira_cloud.core.config import JiraSettings
from jira_cloud.core.domain.errors import (
    JiraDecodeError,
    JiraError,
    JiraRequestError,
    JiraTransportError,
    JiraValidationError,
)
from jira_cloud.core.domain.response import ResponseScheme

__version__ = "0.1.0"

__all__ = [
    "AuthenticationService",
    "JiraClient",
    "JiraDecodeError",
    "JiraError",
    "JiraRequestError",
    "JiraSettings",
    "JiraTransportError",
    "JiraValidationError",
    "ResponseScheme",
    "encode_params",
    "extract_role_ids",
    "__version__",
]
