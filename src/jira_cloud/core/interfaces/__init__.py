"""Interfaces of the core.

Protocols that concrete adapters implement, so services depend on a contract
rather than on the httpx-backed client.
"""

from jira_cloud.core.interfaces.connector import JiraConnector

__all__ = ["JiraConnector"]
