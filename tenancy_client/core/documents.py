"""
JSON decoding of API responses.

Any body that is not the expected document raises DecodeError.
"""

import json
from typing import Any, Callable, TypeVar

from .exceptions import DecodeError, report_exception
from .models import Page

T = TypeVar("T")


def _fail(detail: str, body: bytes | None = None, cause: Exception | None = None):
    error = DecodeError(detail, body)
    report_exception(error)
    raise error from cause


def decode_json(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        _fail(f"Malformed JSON body: {e}", body, e)


def decode_resource(document: Any, factory: Callable[[dict], T]) -> T:
    """Build a resource out of a `{"metadata": ..., "entity": ...}` document."""
    if not isinstance(document, dict):
        _fail(f"Expected a resource document, got {type(document).__name__}")
    try:
        return factory(document)
    except (KeyError, TypeError, ValueError) as e:
        _fail(f"Invalid resource document: {e!r}", cause=e)


def decode_page(document: Any, factory: Callable[[dict], T]) -> Page[T]:
    """
    Build a Page out of a listing document.

    Empty cursor URLs are normalized to None, so that a page has a next
    (resp. previous) URL if and only if a later (resp. earlier) page exists.
    """
    if not isinstance(document, dict):
        _fail(f"Expected a listing document, got {type(document).__name__}")
    try:
        resources = document["resources"]
        total_results = int(document["total_results"])
        total_pages = int(document["total_pages"])
    except (KeyError, TypeError, ValueError) as e:
        _fail(f"Invalid listing document: {e!r}", cause=e)
    if not isinstance(resources, list):
        _fail("Invalid listing document: resources is not a list")
    return Page(
        total_results=total_results,
        total_pages=total_pages,
        next_url=document.get("next_url") or None,
        prev_url=document.get("prev_url") or None,
        items=tuple(decode_resource(resource, factory) for resource in resources),
    )
