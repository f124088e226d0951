"""Issue-scoped services grouped under `client.issue`."""

from __future__ import annotations

from jira_cloud.adapters.services.field import FieldService
from jira_cloud.adapters.services.issue_link import IssueLinkService
from jira_cloud.adapters.services.priority import PriorityService
from jira_cloud.adapters.services.resolution import ResolutionService
from jira_cloud.core.interfaces.connector import JiraConnector


class IssueService:
    def __init__(self, client: JiraConnector) -> None:
        self.field = FieldService(client)
        self.link = IssueLinkService(client)
        self.priority = PriorityService(client)
        self.resolution = ResolutionService(client)
