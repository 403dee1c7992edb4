"""Repository for entities moderated through an approval state (blackboards, events)."""

from typing import List

from campus_types.base import APPROVAL_STATES

from .base import EntityRepository


class ApprovalRepository(EntityRepository):

    async def set_state(self, entity_id: str, state: str):
        """
        Move a record to another approval state.

        Raises:
            ValidationException: state is not one of APPROVAL_STATES
        """
        return await self.modify(entity_id, lambda entity: entity.set_state(state))

    async def get_by_state(self, state: str) -> List:
        if state not in APPROVAL_STATES:
            return []
        return await self.find_all_by_rule({"state": state})
