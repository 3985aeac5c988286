"""Repository interfaces and their SQLAlchemy implementations."""

from motohub.stores.base import (
    DocumentStore,
    MotorcycleStore,
    PostStore,
    ProfileStore,
    UserStore,
)
from motohub.stores.sql import (
    SqlMotorcycleStore,
    SqlPostStore,
    SqlProfileStore,
    SqlUserStore,
)

__all__ = [
    "DocumentStore",
    "MotorcycleStore",
    "PostStore",
    "ProfileStore",
    "SqlMotorcycleStore",
    "SqlPostStore",
    "SqlProfileStore",
    "SqlUserStore",
    "UserStore",
]
