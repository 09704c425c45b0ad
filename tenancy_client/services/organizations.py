from tenancy_client.core.models import Organization, User
from tenancy_client.core.pagination import PaginatedList

from .base import Service


class OrganizationsService(Service):
    async def create(self, name: str, token: str) -> Organization:
        return await self._create("/v2/organizations", {"name": name}, Organization.from_document, token)

    async def get(self, guid: str, token: str) -> Organization:
        return await self._get(f"/v2/organizations/{guid}", Organization.from_document, token)

    async def delete(self, guid: str, token: str) -> None:
        """Delete an organization along with its spaces and applications."""
        await self._delete(f"/v2/organizations/{guid}", token, {"recursive": "true"})

    def users(self, guid: str) -> PaginatedList[User]:
        return self._list(f"/v2/organizations/{guid}/users", User.from_document)

    def managers(self, guid: str) -> PaginatedList[User]:
        return self._list(f"/v2/organizations/{guid}/managers", User.from_document)

    def billing_managers(self, guid: str) -> PaginatedList[User]:
        return self._list(f"/v2/organizations/{guid}/billing_managers", User.from_document)

    def auditors(self, guid: str) -> PaginatedList[User]:
        return self._list(f"/v2/organizations/{guid}/auditors", User.from_document)

    async def list_users(self, guid: str, token: str) -> PaginatedList[User]:
        return await self.users(guid).fetch(token)
