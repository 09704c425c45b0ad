from tenancy_client.core.models import Application

from .base import Service


class ApplicationsService(Service):
    async def create(self, name: str, space_guid: str, token: str) -> Application:
        payload = {"name": name, "space_guid": space_guid}
        return await self._create("/v2/apps", payload, Application.from_document, token)

    async def get(self, guid: str, token: str) -> Application:
        return await self._get(f"/v2/apps/{guid}", Application.from_document, token)

    async def delete(self, guid: str, token: str) -> None:
        await self._delete(f"/v2/apps/{guid}", token)
