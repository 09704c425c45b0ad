"""
Request executor.

Issues a single authenticated HTTP request against the API and hands back the
raw response body. Every other module goes through `execute`.
"""

import asyncio
import json
import logging
from typing import Any, Iterable

import aiohttp

from .exceptions import TransportError, UnexpectedStatusError, report_exception
from .settings import Config
from .version import get_client_version

logger = logging.getLogger(__name__)

USER_AGENT = f"tenancy-client/{get_client_version()}"


def _headers(token: str, with_body: bool) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
        "User-Agent": USER_AGENT,
    }
    if with_body:
        headers["Content-Type"] = "application/json"
    return headers


async def _send(
    session: aiohttp.ClientSession,
    config: Config,
    method: str,
    url: str,
    query: list[tuple[str, str]],
    headers: dict[str, str],
    data: str | None,
) -> tuple[int, bytes]:
    async with session.request(
        method,
        url,
        params=query or None,
        headers=headers,
        data=data,
        ssl=False if config.skip_verify_ssl else True,
        timeout=aiohttp.ClientTimeout(total=config.request_timeout),
    ) as res:
        return res.status, await res.read()


async def execute(
    config: Config,
    method: str,
    path: str,
    *,
    token: str,
    query: Iterable[tuple[str, str]] = (),
    body: Any = None,
    acceptable_status_codes: Iterable[int] = (200,),
    session: aiohttp.ClientSession | None = None,
) -> tuple[int, bytes]:
    """
    Execute one HTTP request and return its status and raw body.

    Args:
        config: Connection settings (host, TLS policy, timeout)
        method: HTTP method
        path: Path relative to the configured host
        token: Bearer token, sent as is
        query: Ordered query parameters
        body: JSON-serializable payload, if any
        acceptable_status_codes: Statuses considered a success
        session: Session to reuse, a short-lived one is opened otherwise

    Raises:
        TransportError: If the round trip could not be completed
        UnexpectedStatusError: If the status is not an acceptable one
    """
    url = config.url(path)
    query = list(query)
    data = json.dumps(body) if body is not None else None
    headers = _headers(token, data is not None)
    logger.debug("%s %s query=%s", method, url, query)

    own = session is None
    if own:
        session = aiohttp.ClientSession()
    try:
        status, content = await _send(session, config, method, url, query, headers, data)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        error = TransportError(method, url, str(e) or e.__class__.__name__)
        report_exception(error, method=method, url=url)
        raise error from e
    finally:
        if own:
            await session.close()

    if status not in set(acceptable_status_codes):
        logger.warning("%s %s returned unexpected status %s", method, url, status)
        error = UnexpectedStatusError(status, content, method=method, url=url)
        if status >= 500:
            report_exception(error, method=method, url=url, status=status)
        raise error
    return status, content
