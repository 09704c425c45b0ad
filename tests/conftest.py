import pytest
from aioresponses import aioresponses

from tenancy_client import config
from tenancy_client.core.settings import Config

HOST = "https://api.example.com"
TOKEN = "some-token"
SPACE_GUID = "aaaaaaaa-1111-bbbb-2222-cccccccccccc"
ORG_GUID = "aaaaaaaa-5555-bbbb-6666-cccccccccccc"
DEVELOPERS_PATH = f"/v2/spaces/{SPACE_GUID}/developers"


@pytest.fixture(autouse=True)
def setup():
    config.override(HOST=HOST, MAX_PAGES=1000, ENVIRONMENT="")
    yield
    config.override(HOST=HOST, MAX_PAGES=1000, ENVIRONMENT="")


@pytest.fixture
def cc_config():
    return Config(host=HOST)


@pytest.fixture
def rmock():
    with aioresponses() as m:
        yield m


def user_document(guid: str, username: str | None = None) -> dict:
    return {
        "metadata": {"guid": guid, "url": f"/v2/users/{guid}"},
        "entity": {
            "admin": False,
            "active": True,
            "default_space_guid": None,
            "username": username or f"user-{guid}",
        },
    }


def page_url(path: str, page: int, page_size: int) -> str:
    return f"{path}?order-direction=asc&page={page}&results-per-page={page_size}"


def paged_documents(path: str, guids: list[str], page_size: int) -> list[dict]:
    """Split users into listing documents, the way the API pages them."""
    chunks = [guids[i : i + page_size] for i in range(0, len(guids), page_size)] or [[]]
    documents = []
    for number, chunk in enumerate(chunks, start=1):
        documents.append(
            {
                "total_results": len(guids),
                "total_pages": len(chunks) if guids else 0,
                "prev_url": page_url(path, number - 1, page_size) if number > 1 else None,
                "next_url": page_url(path, number + 1, page_size) if number < len(chunks) else None,
                "resources": [user_document(guid) for guid in chunk],
            }
        )
    return documents


def mock_listing(rmock, path: str, guids: list[str], page_size: int = 50) -> list[dict]:
    """
    Serve a paged listing of users on `path`: the first page answers on the
    bare path and on its own cursor URL, the other ones on their cursor URL.
    """
    documents = paged_documents(path, guids, page_size)
    rmock.get(f"{HOST}{path}", payload=documents[0], repeat=True)
    for number, document in enumerate(documents, start=1):
        rmock.get(f"{HOST}{page_url(path, number, page_size)}", payload=document, repeat=True)
    return documents


def sent(rmock, method: str) -> list[tuple[str, dict]]:
    """List the (url, kwargs) of every request sent with a given method."""
    return [
        (str(url), call.kwargs)
        for (call_method, url), calls in rmock.requests.items()
        if call_method == method
        for call in calls
    ]
