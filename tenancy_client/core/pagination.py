"""
Paginated listings.

A PaginatedList is an immutable value holding one page of a listing endpoint
and the plan used to fetch it. Every network operation returns a new value,
so a failed fetch never alters a list already held by the caller.

The server cursors (`next_url`, `prev_url`) are never interpreted: they are
re-parsed into a new RequestPlan, whatever their encoding is.
"""

import logging
import posixpath
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, TypeVar

from aiohttp import ClientSession

from .documents import decode_json, decode_page, decode_resource
from .exceptions import PaginationError
from .executor import execute
from .models import Page
from .request import RequestPlan
from .settings import Config

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PaginatedList(Generic[T]):
    config: Config
    plan: RequestPlan
    factory: Callable[[dict], T]
    page: Page[T] | None = None
    session: ClientSession | None = None

    @property
    def items(self) -> tuple[T, ...]:
        return self.page.items if self.page else ()

    @property
    def total_results(self) -> int:
        return self.page.total_results if self.page else 0

    @property
    def total_pages(self) -> int:
        return self.page.total_pages if self.page else 0

    @property
    def next_url(self) -> str | None:
        return self.page.next_url if self.page else None

    @property
    def prev_url(self) -> str | None:
        return self.page.prev_url if self.page else None

    def has_next_page(self) -> bool:
        return bool(self.next_url)

    def has_prev_page(self) -> bool:
        return bool(self.prev_url)

    async def fetch(self, token: str) -> "PaginatedList[T]":
        """Fetch the page described by the plan and return it as a new list."""
        _, body = await execute(
            self.config,
            "GET",
            self.plan.path,
            token=token,
            query=self.plan.query,
            acceptable_status_codes=(200,),
            session=self.session,
        )
        page = decode_page(decode_json(body), self.factory)
        logger.debug(
            "Fetched %s: %d items of %d results",
            self.plan.url(),
            len(page.items),
            page.total_results,
        )
        return replace(self, page=page)

    async def next(self, token: str) -> "PaginatedList[T]":
        if not self.has_next_page():
            raise PaginationError(f"{self.plan.url()} has no next page")
        return await self._follow(self.next_url, token)

    async def prev(self, token: str) -> "PaginatedList[T]":
        if not self.has_prev_page():
            raise PaginationError(f"{self.plan.url()} has no previous page")
        return await self._follow(self.prev_url, token)

    async def _follow(self, cursor: str, token: str) -> "PaginatedList[T]":
        try:
            plan = RequestPlan.from_url(cursor)
        except ValueError as e:
            raise PaginationError(str(e)) from e
        return await replace(self, plan=plan, page=None).fetch(token)

    async def collect_all(self, token: str) -> list[T]:
        """
        Return the items of every page of the listing, oldest page first.

        The traversal starts from this page: it walks back to the first page,
        then forward to the last one. Any failure aborts the whole traversal.
        Following a cursor URL already seen, or more than `config.max_pages` pages,
        raises PaginationError.
        """
        origin = self if self.page is not None else await self.fetch(token)
        max_pages = self.config.max_pages
        seen = {origin.plan.url()}

        def check(cursor: str) -> None:
            try:
                key = RequestPlan.from_url(cursor).url()
            except ValueError as e:
                raise PaginationError(str(e)) from e
            if key in seen:
                raise PaginationError(f"cursor cycle detected on {cursor}")
            if max_pages and len(seen) >= max_pages:
                raise PaginationError(f"listing exceeds {max_pages} pages")
            seen.add(key)

        before: list[list[T]] = []
        current = origin
        while current.has_prev_page():
            check(current.prev_url)
            current = await current.prev(token)
            before.append(list(current.items))

        items: list[T] = []
        for page_items in reversed(before):
            items.extend(page_items)
        items.extend(origin.items)

        current = origin
        while current.has_next_page():
            check(current.next_url)
            current = await current.next(token)
            items.extend(current.items)
        return items

    async def create(self, payload: dict[str, Any], token: str) -> T:
        """Create a resource on the listing endpoint and return the server record."""
        _, body = await execute(
            self.config,
            "POST",
            self.plan.path,
            token=token,
            body=payload,
            acceptable_status_codes=(201,),
            session=self.session,
        )
        return decode_resource(decode_json(body), self.factory)

    async def associate(self, guid: str, token: str) -> None:
        await execute(
            self.config,
            "PUT",
            posixpath.join(self.plan.path, guid),
            token=token,
            acceptable_status_codes=(201,),
            session=self.session,
        )

    async def dissociate(self, guid: str, token: str) -> None:
        await execute(
            self.config,
            "DELETE",
            posixpath.join(self.plan.path, guid),
            token=token,
            acceptable_status_codes=(204,),
            session=self.session,
        )


def list_resources(
    config: Config,
    plan: RequestPlan,
    factory: Callable[[dict], T],
    session: ClientSession | None = None,
) -> PaginatedList[T]:
    """Build a list that has not been fetched yet."""
    return PaginatedList(config=config, plan=plan, factory=factory, session=session)


async def fetch_list(
    config: Config,
    plan: RequestPlan,
    factory: Callable[[dict], T],
    token: str,
    session: ClientSession | None = None,
) -> PaginatedList[T]:
    return await list_resources(config, plan, factory, session).fetch(token)
