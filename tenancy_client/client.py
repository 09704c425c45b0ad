"""
Client facade.

Groups the resource services around one Config and, when used as an async
context manager, one shared aiohttp session:

    async with Client() as client:
        space = await client.spaces.create("dev", org.guid, token)
"""

from aiohttp import ClientSession

from tenancy_client.core.settings import Config
from tenancy_client.services import (
    ApplicationsService,
    OrganizationsService,
    SpacesService,
    UsersService,
)


class Client:
    def __init__(self, config: Config | None = None, session: ClientSession | None = None):
        self.config = config or Config.from_settings()
        self._own_session = False
        self._bind(session)

    def _bind(self, session: ClientSession | None) -> None:
        self.session = session
        self.organizations = OrganizationsService(self.config, session)
        self.spaces = SpacesService(self.config, session)
        self.users = UsersService(self.config, session)
        self.applications = ApplicationsService(self.config, session)

    async def __aenter__(self) -> "Client":
        if self.session is None:
            self._own_session = True
            self._bind(ClientSession())
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def close(self) -> None:
        if self._own_session and self.session is not None:
            await self.session.close()
            self._own_session = False
            self._bind(None)
