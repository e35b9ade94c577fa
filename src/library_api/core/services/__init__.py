"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .resource import ResourceService, replace_scalar_fields

__all__ = [
    "DbManageService",
    "DbSessionService",
    "ResourceService",
    "replace_scalar_fields",
]
