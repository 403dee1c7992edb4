"""
Repositories for entities with member lists.

Membership changes go through modify(), so they are persisted and patched
into the cache like any update.
"""

from typing import List

from campus_types.chats import Chat
from campus_types.clubs import Club

from campus_backend.utils.rules import matches_rule

from .base import EntityRepository


class ClubRepository(EntityRepository[Club]):

    async def add_member(self, club_id: str, user_id: str) -> Club:
        return await self.modify(club_id, lambda club: club.add_member(user_id))

    async def remove_member(self, club_id: str, user_id: str) -> Club:
        return await self.modify(club_id, lambda club: club.remove_member(user_id))

    async def get_clubs_of_user(self, user_id: str) -> List[Club]:
        """Clubs the user leads or is a member of."""
        return await self.find_all_by_rule(
            lambda club: matches_rule(club, {"members": user_id}) or matches_rule(club, {"leaders": user_id})
        )


class ChatRepository(EntityRepository[Chat]):

    async def add_target(self, chat_id: str, user_id: str) -> Chat:
        return await self.modify(chat_id, lambda chat: chat.add_target(user_id))

    async def remove_target(self, chat_id: str, user_id: str) -> Chat:
        return await self.modify(chat_id, lambda chat: chat.remove_target(user_id))

    async def get_chats_of_user(self, user_id: str) -> List[Chat]:
        return await self.find_all_by_rule({"targets": user_id})
