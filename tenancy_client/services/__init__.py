"""Resource-specific API helpers built on the core listing engine."""

from .applications import ApplicationsService
from .organizations import OrganizationsService
from .spaces import SpacesService
from .users import UsersService

__all__ = [
    "ApplicationsService",
    "OrganizationsService",
    "SpacesService",
    "UsersService",
]
