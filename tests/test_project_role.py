"""Tests for project roles and role-ID extraction."""

from __future__ import annotations

import pytest

from jira_cloud import JiraDecodeError, JiraRequestError, extract_role_ids
from jira_cloud.core.domain.errors import NoProjectIDOrKeyError, NoProjectRoleIDError, NoProjectRoleNameError

ROLE_URL = "https://ctreminiom.atlassian.net/rest/api/3/project/10000/role/{}"


@pytest.mark.unit
class TestExtractRoleIds:
    def test_last_segment_becomes_the_id(self):
        roles = {
            "Administrators": ROLE_URL.format(10002),
            "Developers": ROLE_URL.format(10001),
            "atlassian-addons-project-access": ROLE_URL.format(10003),
        }
        assert extract_role_ids(roles) == {
            "Administrators": 10002,
            "Developers": 10001,
            "atlassian-addons-project-access": 10003,
        }

    def test_signed_segment_is_accepted(self):
        assert extract_role_ids({"Developers": ROLE_URL.format("+10001")}) == {"Developers": 10001}

    def test_empty_mapping(self):
        assert extract_role_ids({}) == {}

    @pytest.mark.parametrize(
        "link",
        [
            "https://ctreminiom.atlassian.net/rest/api/3/project/10000/role/admins",
            "https://ctreminiom.atlassian.net/rest/api/3/project/10000/role/",
            "",
            ROLE_URL.format("10_002"),
            ROLE_URL.format(" 10002"),
            ROLE_URL.format("١٠٠٠٢"),
        ],
    )
    def test_non_numeric_segment_is_a_decode_error(self, link):
        with pytest.raises(JiraDecodeError, match="Developers"):
            extract_role_ids({"Developers": link})

    def test_non_string_value_is_a_decode_error(self):
        with pytest.raises(JiraDecodeError, match="expected a URL string"):
            extract_role_ids({"Developers": 10001})


class TestProjectRoles:
    @pytest.mark.asyncio
    async def test_gets_resolves_role_ids(self, jira):
        client, route = jira(body={"Administrators": ROLE_URL.format(10002), "Developers": ROLE_URL.format(10001)})
        async with client:
            roles, response = await client.project.role.gets("KP")

        assert route.last.url.path == "/rest/api/3/project/KP/role"
        assert roles == {"Administrators": 10002, "Developers": 10001}
        assert response.code == 200

    @pytest.mark.asyncio
    async def test_gets_bad_role_url_keeps_the_response(self, jira):
        client, _ = jira(body={"Developers": ROLE_URL.format("dev")})
        async with client:
            with pytest.raises(JiraDecodeError) as excinfo:
                await client.project.role.gets("KP")
        assert excinfo.value.response is not None
        assert excinfo.value.response.code == 200

    @pytest.mark.asyncio
    async def test_gets_rejects_a_list(self, jira):
        client, _ = jira(body=[ROLE_URL.format(10002)])
        async with client:
            with pytest.raises(JiraDecodeError, match="JSON object"):
                await client.project.role.gets("KP")

    @pytest.mark.asyncio
    async def test_gets_rejects_empty_body(self, jira):
        client, _ = jira(status=200)
        async with client:
            with pytest.raises(JiraDecodeError):
                await client.project.role.gets("KP")

    @pytest.mark.asyncio
    async def test_get(self, jira):
        client, route = jira(
            body={
                "self": ROLE_URL.format(10002),
                "name": "Administrators",
                "id": 10002,
                "actors": [{"id": 10240, "displayName": "jira-developers", "type": "atlassian-group-role-actor"}],
            }
        )
        async with client:
            role, _ = await client.project.role.get("KP", 10002)
        assert route.last.url.path == "/rest/api/3/project/KP/role/10002"
        assert role.actors[0].display_name == "jira-developers"

    @pytest.mark.asyncio
    async def test_get_requires_role_id(self, jira):
        client, route = jira()
        async with client:
            with pytest.raises(NoProjectRoleIDError):
                await client.project.role.get("KP", 0)
        assert route.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.project.role.gets(""),
            lambda c: c.project.role.get("", 10002),
            lambda c: c.project.role.details(""),
        ],
    )
    async def test_project_is_required(self, jira, call):
        client, _ = jira()
        async with client:
            with pytest.raises(NoProjectIDOrKeyError):
                await call(client)

    @pytest.mark.asyncio
    async def test_details(self, jira):
        client, route = jira(body=[{"id": 10002, "name": "Administrators", "admin": True, "roleConfigurable": True}])
        async with client:
            details, _ = await client.project.role.details("KP")
        assert route.last.url.path == "/rest/api/3/project/KP/roledetails"
        assert details[0].role_configurable is True

    @pytest.mark.asyncio
    async def test_global_roles(self, jira):
        client, route = jira(body=[{"id": 10360, "name": "Developers"}])
        async with client:
            roles, _ = await client.project.role.global_roles()
        assert route.last.url.path == "/rest/api/3/role"
        assert roles[0].id == 10360

    @pytest.mark.asyncio
    async def test_create(self, jira):
        client, route = jira(body={"id": 10360, "name": "Developers", "description": "A project role"})
        async with client:
            role, _ = await client.project.role.create("Developers", "A project role")
        assert route.last.method == "POST"
        assert route.last_json == {"name": "Developers", "description": "A project role"}
        assert role.description == "A project role"

    @pytest.mark.asyncio
    async def test_create_requires_name(self, jira):
        client, _ = jira()
        async with client:
            with pytest.raises(NoProjectRoleNameError):
                await client.project.role.create("")

    @pytest.mark.asyncio
    async def test_gets_unknown_project(self, jira):
        client, _ = jira(status=404, body={"errorMessages": ["No project could be found with key 'NOPE'."]})
        async with client:
            with pytest.raises(JiraRequestError, match="Status Code: 404") as excinfo:
                await client.project.role.gets("NOPE")
        assert excinfo.value.response.json()["errorMessages"] == ["No project could be found with key 'NOPE'."]
