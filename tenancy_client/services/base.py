from typing import Any, Callable, TypeVar

from aiohttp import ClientSession

from tenancy_client.core.documents import decode_json, decode_resource
from tenancy_client.core.executor import execute
from tenancy_client.core.pagination import PaginatedList, list_resources
from tenancy_client.core.request import RequestPlan
from tenancy_client.core.settings import Config

T = TypeVar("T")


class Service:
    """Shared plumbing of the resource services."""

    def __init__(self, config: Config, session: ClientSession | None = None) -> None:
        self.config = config
        self.session = session

    def _list(self, path: str, factory: Callable[[dict], T], query=None) -> PaginatedList[T]:
        return list_resources(self.config, RequestPlan.build(path, query), factory, self.session)

    async def _get(self, path: str, factory: Callable[[dict], T], token: str) -> T:
        _, body = await execute(
            self.config, "GET", path, token=token, acceptable_status_codes=(200,), session=self.session
        )
        return decode_resource(decode_json(body), factory)

    async def _create(
        self, path: str, payload: dict[str, Any], factory: Callable[[dict], T], token: str
    ) -> T:
        return await self._list(path, factory).create(payload, token)

    async def _delete(self, path: str, token: str, query=None) -> None:
        plan = RequestPlan.build(path, query)
        await execute(
            self.config,
            "DELETE",
            plan.path,
            token=token,
            query=plan.query,
            acceptable_status_codes=(204,),
            session=self.session,
        )
