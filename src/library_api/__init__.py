"""Library records API.

CRUD service over authors, books and users, exposed over HTTP/JSON and
persisted through SQLModel.
"""

__version__ = "0.1.0"
