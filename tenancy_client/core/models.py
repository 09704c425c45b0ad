"""
Data models for the core module.

Resources are built from the `{"metadata": {...}, "entity": {...}}` documents
returned by the API. Only the metadata GUID is required, entity attributes
fall back to defaults when the server omits them.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _split(document: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    return document["metadata"]["guid"], document.get("entity") or {}


@dataclass(frozen=True)
class User:
    """A user account, identified by its GUID."""

    guid: str
    username: str | None = None
    admin: bool = False
    active: bool = False
    default_space_guid: str | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        guid, entity = _split(document)
        return cls(
            guid=guid,
            username=entity.get("username"),
            admin=bool(entity.get("admin", False)),
            active=bool(entity.get("active", False)),
            default_space_guid=entity.get("default_space_guid"),
        )


@dataclass(frozen=True)
class Organization:
    guid: str
    name: str = ""
    status: str = ""
    quota_definition_guid: str | None = None
    billing_enabled: bool = False

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Organization":
        guid, entity = _split(document)
        return cls(
            guid=guid,
            name=entity.get("name", ""),
            status=entity.get("status", ""),
            quota_definition_guid=entity.get("quota_definition_guid"),
            billing_enabled=bool(entity.get("billing_enabled", False)),
        )


@dataclass(frozen=True)
class Space:
    guid: str
    name: str = ""
    organization_guid: str | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Space":
        guid, entity = _split(document)
        return cls(
            guid=guid,
            name=entity.get("name", ""),
            organization_guid=entity.get("organization_guid"),
        )


@dataclass(frozen=True)
class Application:
    guid: str
    name: str = ""
    space_guid: str | None = None
    instances: int = 0
    memory: int = 0
    state: str = ""

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Application":
        guid, entity = _split(document)
        return cls(
            guid=guid,
            name=entity.get("name", ""),
            space_guid=entity.get("space_guid"),
            instances=int(entity.get("instances") or 0),
            memory=int(entity.get("memory") or 0),
            state=entity.get("state", ""),
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    """One decoded page of a listing."""

    total_results: int = 0
    total_pages: int = 0
    next_url: str | None = None
    prev_url: str | None = None
    items: tuple[T, ...] = field(default_factory=tuple)
