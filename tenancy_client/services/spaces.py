from tenancy_client.core.models import Space, User
from tenancy_client.core.pagination import PaginatedList

from .base import Service


class SpacesService(Service):
    async def create(self, name: str, organization_guid: str, token: str) -> Space:
        payload = {"name": name, "organization_guid": organization_guid}
        return await self._create("/v2/spaces", payload, Space.from_document, token)

    async def get(self, guid: str, token: str) -> Space:
        return await self._get(f"/v2/spaces/{guid}", Space.from_document, token)

    async def delete(self, guid: str, token: str) -> None:
        await self._delete(f"/v2/spaces/{guid}", token, {"recursive": "true"})

    def developers(self, guid: str) -> PaginatedList[User]:
        return self._list(f"/v2/spaces/{guid}/developers", User.from_document)

    def managers(self, guid: str) -> PaginatedList[User]:
        return self._list(f"/v2/spaces/{guid}/managers", User.from_document)

    def auditors(self, guid: str) -> PaginatedList[User]:
        return self._list(f"/v2/spaces/{guid}/auditors", User.from_document)

    async def list_users(self, guid: str, token: str) -> PaginatedList[User]:
        """Fetch the first page of every user holding a role in the space."""
        return await self._list(f"/v2/spaces/{guid}/user_roles", User.from_document).fetch(token)
