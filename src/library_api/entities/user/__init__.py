"""User entity module.

- User: record model exchanged with clients
- UserTable: database persistence model
- UserRepository: data access layer
"""

from .entity import User
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserRepository", "UserTable"]
