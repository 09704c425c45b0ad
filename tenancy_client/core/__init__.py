"""
Core module for tenancy_client.

This module contains the request executor, the paginated listing engine
and the bounded work pool the resource services are built on.
"""

from .exceptions import (
    ClientException,
    DecodeError,
    PaginationError,
    TaskError,
    TransportError,
    UnexpectedStatusError,
)
from .executor import execute
from .models import Application, Organization, Page, Space, User
from .pagination import PaginatedList, fetch_list, list_resources
from .pool import Result, WorkPool, dispatch
from .request import RequestPlan
from .settings import Config

__all__ = [
    "Application",
    "ClientException",
    "Config",
    "DecodeError",
    "Organization",
    "Page",
    "PaginatedList",
    "PaginationError",
    "RequestPlan",
    "Result",
    "Space",
    "TaskError",
    "TransportError",
    "UnexpectedStatusError",
    "User",
    "WorkPool",
    "dispatch",
    "execute",
    "fetch_list",
    "list_resources",
]
