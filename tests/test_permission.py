"""Tests for permissions, permission schemes and grants."""

from __future__ import annotations

import pytest

from jira_cloud import JiraDecodeError, JiraRequestError
from jira_cloud.core.domain.errors import (
    NoPayloadError,
    NoPermissionGrantIDError,
    NoPermissionKeysError,
    NoPermissionSchemeIDError,
)
from jira_cloud.core.domain.models import (
    BulkProjectPermissions,
    PermissionCheckPayload,
    PermissionGrantHolder,
    PermissionGrantPayload,
    PermissionScheme,
)

SCHEME = {
    "expand": "permissions,user,group,projectRole,field,all",
    "id": 10000,
    "self": "https://ctreminiom.atlassian.net/rest/api/3/permissionscheme/10000",
    "name": "Default Permission Scheme",
    "description": "Default scheme for new projects",
}

GRANT = {
    "id": 10004,
    "self": "https://ctreminiom.atlassian.net/rest/api/3/permissionscheme/10000/permission/10004",
    "holder": {"type": "projectRole", "parameter": "10002", "expand": "projectRole"},
    "permission": "ADMINISTER_PROJECTS",
}


class TestPermissions:
    @pytest.mark.asyncio
    async def test_gets(self, jira):
        client, route = jira(
            body={
                "permissions": {
                    "BULK_CHANGE": {"key": "BULK_CHANGE", "name": "Bulk Change", "type": "GLOBAL"},
                    "BROWSE_PROJECTS": {"key": "BROWSE_PROJECTS", "name": "Browse Projects", "type": "PROJECT"},
                }
            }
        )
        async with client:
            page, _ = await client.permission.gets()
        assert route.last.url.path == "/rest/api/3/permissions"
        assert sorted(page.permissions) == ["BROWSE_PROJECTS", "BULK_CHANGE"]
        assert page.permissions["BULK_CHANGE"].type == "GLOBAL"

    @pytest.mark.asyncio
    async def test_check(self, jira):
        client, route = jira(
            body={
                "projectPermissions": [{"permission": "EDIT_ISSUES", "issues": [10010], "projects": [10001]}],
                "globalPermissions": ["ADMINISTER"],
            }
        )
        payload = PermissionCheckPayload(
            global_permissions=["ADMINISTER"],
            account_id="5b10a2844c20165700ede21g",
            project_permissions=[BulkProjectPermissions(issues=[10010], projects=[10001], permissions=["EDIT_ISSUES"])],
        )
        async with client:
            grants, _ = await client.permission.check(payload)

        assert route.last.method == "POST"
        assert route.last.url.path == "/rest/api/3/permissions/check"
        assert route.last_json == {
            "globalPermissions": ["ADMINISTER"],
            "accountId": "5b10a2844c20165700ede21g",
            "projectPermissions": [{"issues": [10010], "projects": [10001], "permissions": ["EDIT_ISSUES"]}],
        }
        assert grants.global_permissions == ["ADMINISTER"]
        assert grants.project_permissions[0].issues == [10010]

    @pytest.mark.asyncio
    async def test_check_requires_payload(self, jira):
        client, _ = jira()
        async with client:
            with pytest.raises(NoPayloadError):
                await client.permission.check(None)

    @pytest.mark.asyncio
    async def test_projects(self, jira):
        client, route = jira(body={"projects": [{"id": 10000, "key": "KP"}]})
        async with client:
            permitted, _ = await client.permission.projects(["EDIT_ISSUES", "CREATE_ISSUES"])
        assert route.last.url.path == "/rest/api/3/permissions/project"
        assert route.last_json == {"permissions": ["EDIT_ISSUES", "CREATE_ISSUES"]}
        assert permitted.projects[0].key == "KP"

    @pytest.mark.asyncio
    async def test_projects_requires_keys(self, jira):
        client, route = jira()
        async with client:
            with pytest.raises(NoPermissionKeysError):
                await client.permission.projects([])
        assert route.requests == []


class TestPermissionSchemes:
    @pytest.mark.asyncio
    async def test_gets(self, jira):
        client, route = jira(body={"permissionSchemes": [SCHEME]})
        async with client:
            page, _ = await client.permission.scheme.gets()
        assert route.last.url.path == "/rest/api/3/permissionscheme"
        assert page.permission_schemes[0].name == "Default Permission Scheme"

    @pytest.mark.asyncio
    async def test_gets_malformed_body(self, jira):
        client, _ = jira(content=b"<html>maintenance</html>")
        async with client:
            with pytest.raises(JiraDecodeError) as excinfo:
                await client.permission.scheme.gets()
        assert excinfo.value.response.code == 200

    @pytest.mark.asyncio
    async def test_get_with_expand(self, jira):
        client, route = jira(body={**SCHEME, "permissions": [GRANT]})
        async with client:
            scheme, _ = await client.permission.scheme.get(10000, ["field", "group"])
        assert route.last.url.path == "/rest/api/3/permissionscheme/10000"
        assert route.last.url.params["expand"] == "field,group"
        assert scheme.permissions[0].holder.type == "projectRole"

    @pytest.mark.asyncio
    async def test_create_and_update(self, jira):
        client, route = jira(body=SCHEME)
        payload = PermissionScheme(name="EF Permission Scheme", description="EF Permission Scheme description")
        async with client:
            await client.permission.scheme.create(payload)
            assert route.last.method == "POST"
            assert route.last_json == {"name": "EF Permission Scheme", "description": "EF Permission Scheme description"}
            await client.permission.scheme.update(10000, payload)
        assert route.last.method == "PUT"
        assert route.last.url.path == "/rest/api/3/permissionscheme/10000"

    @pytest.mark.asyncio
    async def test_delete(self, jira):
        client, route = jira(status=204)
        async with client:
            response = await client.permission.scheme.delete(10000)
        assert route.last.method == "DELETE"
        assert response.code == 204

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.permission.scheme.get(0),
            lambda c: c.permission.scheme.update(0, PermissionScheme(name="x")),
            lambda c: c.permission.scheme.delete(0),
            lambda c: c.permission.scheme.grant.gets(0),
            lambda c: c.permission.scheme.grant.get(0, 10004),
            lambda c: c.permission.scheme.grant.delete(0, 10004),
            lambda c: c.permission.scheme.grant.create(0, PermissionGrantPayload(permission="x")),
        ],
    )
    async def test_scheme_id_is_required(self, jira, call):
        client, route = jira()
        async with client:
            with pytest.raises(NoPermissionSchemeIDError, match="no permission scheme id set"):
                await call(client)
        assert route.requests == []

    @pytest.mark.asyncio
    async def test_delete_forbidden(self, jira):
        client, _ = jira(status=403)
        async with client:
            with pytest.raises(JiraRequestError) as excinfo:
                await client.permission.scheme.delete(10000)
        assert excinfo.value.response.code == 403


class TestPermissionGrants:
    @pytest.mark.asyncio
    async def test_create(self, jira):
        client, route = jira(status=201, body=GRANT)
        payload = PermissionGrantPayload(
            holder=PermissionGrantHolder(type="projectRole", parameter="10002"),
            permission="ADMINISTER_PROJECTS",
        )
        async with client:
            grant, _ = await client.permission.scheme.grant.create(10000, payload)
        assert route.last.url.path == "/rest/api/3/permissionscheme/10000/permission"
        assert route.last_json == {
            "holder": {"type": "projectRole", "parameter": "10002"},
            "permission": "ADMINISTER_PROJECTS",
        }
        assert grant.id == 10004

    @pytest.mark.asyncio
    async def test_gets(self, jira):
        client, route = jira(body={"permissions": [GRANT], "expand": "user,group"})
        async with client:
            grants, _ = await client.permission.scheme.grant.gets(10000, ["all"])
        assert route.last.url.params["expand"] == "all"
        assert grants.permissions[0].permission == "ADMINISTER_PROJECTS"

    @pytest.mark.asyncio
    async def test_get_and_delete(self, jira):
        client, route = jira(body=GRANT)
        async with client:
            grant, _ = await client.permission.scheme.grant.get(10000, 10004)
            assert route.last.url.path == "/rest/api/3/permissionscheme/10000/permission/10004"
            assert "expand" not in route.last.url.params
            await client.permission.scheme.grant.delete(10000, 10004)
        assert route.last.method == "DELETE"
        assert grant.holder.parameter == "10002"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.permission.scheme.grant.get(10000, 0),
            lambda c: c.permission.scheme.grant.delete(10000, 0),
        ],
    )
    async def test_grant_id_is_required(self, jira, call):
        client, _ = jira()
        async with client:
            with pytest.raises(NoPermissionGrantIDError):
                await call(client)
