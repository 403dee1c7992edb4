"""
Message repository.

Adds reaction, poll and edit operations on top of the generic repository.
Each one mutates a copy of the cached message and persists it through
update(), so the cache is patched and verified as for any other write.
"""

from typing import Any, List

from campus_types.messages import Message

from .base import EntityRepository


class MessageRepository(EntityRepository[Message]):
    """Repository for Message entities."""

    async def get_by_chat(self, chat_id: str) -> List[Message]:
        """Messages of one chat in cache order; empty if there are none."""
        return await self.find_all_by_rule({"chat": chat_id})

    async def get_replies(self, message_id: str) -> List[Message]:
        return await self.find_all_by_rule({"answer": message_id})

    async def add_reaction(self, message_id: str, emoji: str) -> Message:
        return await self.modify(message_id, lambda message: message.add_reaction(emoji))

    async def remove_reaction(self, message_id: str, emoji: str) -> Message:
        return await self.modify(message_id, lambda message: message.remove_reaction(emoji))

    async def edit(self, message_id: str, content: List[Any]) -> Message:
        """Replace the content, keeping the previous one in edit_history."""
        return await self.modify(message_id, lambda message: message.edit(content))

    async def vote(self, message_id: str, answer_id: int, user_id: str) -> Message:
        """
        Record a poll vote.

        Raises:
            ValidationException: no poll, unknown answer, duplicate vote or
                max_votes_per_user reached
        """
        return await self.modify(message_id, lambda message: message.vote(answer_id, user_id))

    async def unvote(self, message_id: str, answer_id: int, user_id: str) -> Message:
        return await self.modify(message_id, lambda message: message.unvote(answer_id, user_id))
