from tenancy_client.core.models import Organization, Space, User
from tenancy_client.core.pagination import PaginatedList

from .base import Service


class UsersService(Service):
    async def create(self, guid: str, token: str) -> User:
        """Register a user whose GUID was issued by the identity provider."""
        return await self._create("/v2/users", {"guid": guid}, User.from_document, token)

    async def get(self, guid: str, token: str) -> User:
        return await self._get(f"/v2/users/{guid}", User.from_document, token)

    async def delete(self, guid: str, token: str) -> None:
        await self._delete(f"/v2/users/{guid}", token)

    def spaces(self, guid: str) -> PaginatedList[Space]:
        return self._list(f"/v2/users/{guid}/spaces", Space.from_document)

    def organizations(self, guid: str) -> PaginatedList[Organization]:
        return self._list(f"/v2/users/{guid}/organizations", Organization.from_document)
