"""Tests for UserService."""

from __future__ import annotations

import pytest

from jira_cloud import JiraDecodeError, JiraRequestError
from jira_cloud.core.domain.errors import NoAccountIDError, NoAccountIDsError, NoPayloadError
from jira_cloud.core.domain.models import UserPayload

ACCOUNT_ID = "5b10a2844c20165700ede21g"

USER = {
    "self": f"https://ctreminiom.atlassian.net/rest/api/3/user?accountId={ACCOUNT_ID}",
    "accountId": ACCOUNT_ID,
    "accountType": "atlassian",
    "emailAddress": "mia@example.com",
    "displayName": "Mia Krystof",
    "active": True,
    "timeZone": "Australia/Sydney",
    "groups": {"size": 1, "items": [{"name": "jira-software-users"}]},
}


@pytest.mark.asyncio
async def test_get_with_expand(jira):
    client, route = jira(body=USER)
    async with client:
        user, _ = await client.user.get(ACCOUNT_ID, ["groups", "applicationRoles"])

    assert route.last.url.path == "/rest/api/3/user"
    assert route.last.url.params["accountId"] == ACCOUNT_ID
    assert route.last.url.params["expand"] == "groups,applicationRoles"
    assert user.display_name == "Mia Krystof"
    assert user.groups.items[0].name == "jira-software-users"


@pytest.mark.asyncio
async def test_create(jira):
    client, route = jira(status=201, body=USER)
    payload = UserPayload(email_address="mia@example.com", display_name="Mia Krystof", products=["jira-software"])
    async with client:
        user, _ = await client.user.create(payload)
    assert route.last.method == "POST"
    assert route.last_json == {
        "emailAddress": "mia@example.com",
        "displayName": "Mia Krystof",
        "products": ["jira-software"],
    }
    assert user.account_id == ACCOUNT_ID


@pytest.mark.asyncio
async def test_create_requires_payload(jira):
    client, _ = jira()
    async with client:
        with pytest.raises(NoPayloadError):
            await client.user.create(None)


@pytest.mark.asyncio
async def test_delete(jira):
    client, route = jira(status=204)
    async with client:
        await client.user.delete(ACCOUNT_ID)
    assert route.last.method == "DELETE"
    assert route.last.url.params["accountId"] == ACCOUNT_ID


@pytest.mark.asyncio
async def test_find(jira):
    client, route = jira(body={"maxResults": 50, "startAt": 0, "total": 2, "isLast": True, "values": [USER, {"accountId": "5b10ac8d82e05b22cc7d4ef5"}]})
    async with client:
        page, _ = await client.user.find([ACCOUNT_ID, "5b10ac8d82e05b22cc7d4ef5"])

    assert route.last.url.path == "/rest/api/3/user/bulk"
    assert route.last.url.params.get_list("accountId") == [ACCOUNT_ID, "5b10ac8d82e05b22cc7d4ef5"]
    assert len(page.values) == 2


@pytest.mark.asyncio
async def test_find_requires_account_ids(jira):
    client, route = jira()
    async with client:
        with pytest.raises(NoAccountIDsError):
            await client.user.find([])
    assert route.requests == []


@pytest.mark.asyncio
async def test_groups(jira):
    client, route = jira(body=[{"name": "jira-administrators", "groupId": "276f955c-63d7-42c8-9520-92d01dca0625"}])
    async with client:
        groups, _ = await client.user.groups(ACCOUNT_ID)
    assert route.last.url.path == "/rest/api/3/user/groups"
    assert groups[0].group_id == "276f955c-63d7-42c8-9520-92d01dca0625"


@pytest.mark.asyncio
async def test_gets(jira):
    client, route = jira(body=[USER])
    async with client:
        users, _ = await client.user.gets(0, 1000)
    assert route.last.url.path == "/rest/api/3/users/search"
    assert dict(route.last.url.params) == {"startAt": "0", "maxResults": "1000"}
    assert users[0].time_zone == "Australia/Sydney"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [lambda c: c.user.get(""), lambda c: c.user.delete(""), lambda c: c.user.groups("")],
)
async def test_account_id_is_required(jira, call):
    client, route = jira()
    async with client:
        with pytest.raises(NoAccountIDError, match="no account id set"):
            await call(client)
    assert route.requests == []


@pytest.mark.asyncio
async def test_gets_rejects_paged_body(jira):
    client, _ = jira(body={"values": [USER]})
    async with client:
        with pytest.raises(JiraDecodeError):
            await client.user.gets()


@pytest.mark.asyncio
async def test_get_unknown_account(jira):
    client, route = jira(status=404, body={"errorMessages": [f"User with accountId {ACCOUNT_ID} does not exist"]})
    async with client:
        with pytest.raises(JiraRequestError, match="Status Code: 404") as excinfo:
            await client.user.get(ACCOUNT_ID)
    assert excinfo.value.status_code == 404
    assert len(route.requests) == 1
