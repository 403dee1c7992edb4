"""
Repository package for entity data access with write-through caching.

Usage:
    from campus_backend.repositories import Repositories

    repos = Repositories(store)
    user = await repos.users.get_by_id(user_id)
"""

from .base import EntityRepository
from .population import Populator, dehydrate
from .validation import validate_record
from .approval import ApprovalRepository
from .membership import ChatRepository, ClubRepository
from .message import MessageRepository
from .factory import REPOSITORY_CLASSES, Repositories

__all__ = [
    "EntityRepository",
    "Populator",
    "dehydrate",
    "validate_record",
    "ApprovalRepository",
    "ChatRepository",
    "ClubRepository",
    "MessageRepository",
    "REPOSITORY_CLASSES",
    "Repositories",
]
