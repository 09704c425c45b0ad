import json

import pytest

from tenancy_client.core.exceptions import UnexpectedStatusError
from tenancy_client.core.models import Application, Organization, Space, User
from tenancy_client.core.pool import dispatch
from tenancy_client.services import (
    ApplicationsService,
    OrganizationsService,
    SpacesService,
    UsersService,
)

from .conftest import HOST, ORG_GUID, SPACE_GUID, TOKEN, mock_listing, sent, user_document

pytestmark = pytest.mark.asyncio


def org_document(guid: str, name: str) -> dict:
    return {"metadata": {"guid": guid}, "entity": {"name": name, "status": "active"}}


def space_document(guid: str, name: str, organization_guid: str) -> dict:
    return {
        "metadata": {"guid": guid},
        "entity": {"name": name, "organization_guid": organization_guid},
    }


async def test_create_organization(rmock, cc_config):
    rmock.post(f"{HOST}/v2/organizations", status=201, payload=org_document(ORG_GUID, "my-org"))
    org = await OrganizationsService(cc_config).create("my-org", TOKEN)
    assert org == Organization(guid=ORG_GUID, name="my-org", status="active")
    [(_, kwargs)] = sent(rmock, "POST")
    assert json.loads(kwargs["data"]) == {"name": "my-org"}


async def test_create_organization_conflict(rmock, cc_config):
    rmock.post(f"{HOST}/v2/organizations", status=400, body=b'{"code": 30002}')
    with pytest.raises(UnexpectedStatusError) as exc_info:
        await OrganizationsService(cc_config).create("my-org", TOKEN)
    assert exc_info.value.status == 400


async def test_get_organization(rmock, cc_config):
    rmock.get(f"{HOST}/v2/organizations/{ORG_GUID}", payload=org_document(ORG_GUID, "my-org"))
    org = await OrganizationsService(cc_config).get(ORG_GUID, TOKEN)
    assert org.name == "my-org"


async def test_delete_organization_is_recursive(rmock, cc_config):
    rmock.delete(f"{HOST}/v2/organizations/{ORG_GUID}?recursive=true", status=204)
    await OrganizationsService(cc_config).delete(ORG_GUID, TOKEN)
    [(url, kwargs)] = sent(rmock, "DELETE")
    assert kwargs["params"] == [("recursive", "true")]


@pytest.mark.parametrize("role", ["users", "managers", "billing_managers", "auditors"])
async def test_organization_role_lists(cc_config, role):
    users = getattr(OrganizationsService(cc_config), role)(ORG_GUID)
    assert users.plan.path == f"/v2/organizations/{ORG_GUID}/{role}"
    assert users.page is None


async def test_list_organization_users(rmock, cc_config):
    mock_listing(rmock, f"/v2/organizations/{ORG_GUID}/users", ["u1", "u2"])
    users = await OrganizationsService(cc_config).list_users(ORG_GUID, TOKEN)
    assert [user.guid for user in users.items] == ["u1", "u2"]


async def test_create_space(rmock, cc_config):
    rmock.post(
        f"{HOST}/v2/spaces", status=201, payload=space_document(SPACE_GUID, "dev", ORG_GUID)
    )
    space = await SpacesService(cc_config).create("dev", ORG_GUID, TOKEN)
    assert space == Space(guid=SPACE_GUID, name="dev", organization_guid=ORG_GUID)
    [(_, kwargs)] = sent(rmock, "POST")
    assert json.loads(kwargs["data"]) == {"name": "dev", "organization_guid": ORG_GUID}


async def test_delete_space(rmock, cc_config):
    rmock.delete(f"{HOST}/v2/spaces/{SPACE_GUID}?recursive=true", status=204)
    await SpacesService(cc_config).delete(SPACE_GUID, TOKEN)


async def test_list_space_users(rmock, cc_config):
    mock_listing(rmock, f"/v2/spaces/{SPACE_GUID}/user_roles", ["u1"])
    users = await SpacesService(cc_config).list_users(SPACE_GUID, TOKEN)
    assert users.total_results == 1
    assert [user.guid for user in users.items] == ["u1"]


async def test_create_user(rmock, cc_config):
    rmock.post(f"{HOST}/v2/users", status=201, payload=user_document("u1"))
    user = await UsersService(cc_config).create("u1", TOKEN)
    assert user.guid == "u1"
    [(_, kwargs)] = sent(rmock, "POST")
    assert json.loads(kwargs["data"]) == {"guid": "u1"}


async def test_delete_user(rmock, cc_config):
    rmock.delete(f"{HOST}/v2/users/u1", status=204)
    await UsersService(cc_config).delete("u1", TOKEN)


async def test_delete_user_requires_no_content(rmock, cc_config):
    rmock.delete(f"{HOST}/v2/users/u1", status=200, payload={})
    with pytest.raises(UnexpectedStatusError):
        await UsersService(cc_config).delete("u1", TOKEN)


async def test_user_spaces_and_organizations(cc_config):
    service = UsersService(cc_config)
    assert service.spaces("u1").plan.path == "/v2/users/u1/spaces"
    assert service.spaces("u1").factory == Space.from_document
    assert service.organizations("u1").plan.path == "/v2/users/u1/organizations"


async def test_create_application(rmock, cc_config):
    rmock.post(
        f"{HOST}/v2/apps",
        status=201,
        payload={
            "metadata": {"guid": "a1"},
            "entity": {"name": "app", "space_guid": SPACE_GUID, "state": "STOPPED"},
        },
    )
    app = await ApplicationsService(cc_config).create("app", SPACE_GUID, TOKEN)
    assert app == Application(guid="a1", name="app", space_guid=SPACE_GUID, state="STOPPED")


async def test_get_and_delete_application(rmock, cc_config):
    rmock.get(f"{HOST}/v2/apps/a1", payload={"metadata": {"guid": "a1"}, "entity": {}})
    rmock.delete(f"{HOST}/v2/apps/a1", status=204)
    service = ApplicationsService(cc_config)
    assert (await service.get("a1", TOKEN)).guid == "a1"
    await service.delete("a1", TOKEN)


async def test_register_many_developers_concurrently(rmock, cc_config):
    """Create users, give them a role in a space, then list them all."""
    names = [f"user-{i:03}" for i in range(150)]
    rmock.post(f"{HOST}/v2/users", status=201, payload=user_document("x"), repeat=True)
    users = UsersService(cc_config)
    orgs = OrganizationsService(cc_config)
    spaces = SpacesService(cc_config)
    for name in names:
        rmock.put(f"{HOST}/v2/organizations/{ORG_GUID}/users/{name}", status=201, payload={})
        rmock.put(f"{HOST}/v2/spaces/{SPACE_GUID}/developers/{name}", status=201, payload={})

    async def register(name):
        await users.create(name, TOKEN)
        await orgs.users(ORG_GUID).associate(name, TOKEN)
        await spaces.developers(SPACE_GUID).associate(name, TOKEN)

    results = await dispatch(10, register, names)
    assert len(results) == 150
    assert all(result.ok for result in results)

    mock_listing(rmock, f"/v2/spaces/{SPACE_GUID}/developers", names)
    developers = await spaces.developers(SPACE_GUID).fetch(TOKEN)
    assert developers.total_results == 150
    assert developers.total_pages == 3
    assert len(developers.items) == 50
    everyone = await developers.collect_all(TOKEN)
    assert [user.guid for user in everyone] == names
    assert all(isinstance(user, User) for user in everyone)
