"""
Tests for the entity specific repository operations.

Test coverage:
- Message reactions, edits and poll votes
- Approval state changes of blackboards and events
- Club membership and chat targets
"""

import pytest

from campus_types.messages import Message, Poll, PollAnswer
from campus_backend.exceptions import NotFoundException, ValidationException
from campus_backend.repositories import ApprovalRepository, ChatRepository, ClubRepository, MessageRepository

pytestmark = pytest.mark.unit


def poll_message(max_votes=1):
    return {
        "content": [{
            "type": "POLL",
            "value": {
                "question": "Where to go?",
                "answers": [
                    {"id": 1, "emoji": "🏖", "option_name": "Beach"},
                    {"id": 2, "emoji": "⛰", "option_name": "Mountains"},
                ],
                "max_votes_per_user": max_votes,
            },
        }],
    }


class TestMessageModel:

    def test_reactions(self):
        message = Message(content=[{"type": "TEXT", "value": "hi"}])

        message.add_reaction("👍")
        message.add_reaction("👍")
        message.add_reaction("🎉")
        assert [(r.emoji, r.count) for r in message.reactions] == [("👍", 2), ("🎉", 1)]

        message.remove_reaction("🎉")
        message.remove_reaction("🙈")
        assert [(r.emoji, r.count) for r in message.reactions] == [("👍", 2)]

    def test_poll_answer_votes(self):
        answer = PollAnswer(id=1, emoji="🏖", option_name="Beach")

        answer.vote("u1")
        with pytest.raises(ValueError):
            answer.vote("u1")

        answer.unvote("u1")
        with pytest.raises(ValueError):
            answer.unvote("u1")

    def test_poll_vote_limit(self):
        poll = Poll.model_validate(poll_message(max_votes=2)["content"][0]["value"])

        poll.vote(1, "u1")
        poll.vote(2, "u1")

        assert poll.votes_of("u1") == 2
        with pytest.raises(ValueError):
            poll.vote(1, "u1")

    def test_edit_keeps_history(self):
        message = Message(content=[{"type": "TEXT", "value": "helo"}])

        message.edit([{"type": "TEXT", "value": "hello"}])

        assert message.content[0].value == "hello"
        assert message.edit_history[0][0].value == "helo"


class TestMessageRepository:

    @pytest.mark.asyncio
    async def test_repository_class(self, repos):
        assert isinstance(repos.messages, MessageRepository)

    @pytest.mark.asyncio
    async def test_add_and_remove_reaction(self, repos, store):
        message = await repos.messages.create({"content": [{"type": "TEXT", "value": "hi"}]})

        await repos.messages.add_reaction(message.id, "👍")
        updated = await repos.messages.add_reaction(message.id, "👍")

        assert updated.reactions[0].count == 2
        assert (await repos.messages.get_by_id(message.id)).reactions[0].count == 2
        assert (await store.get_document("messages", message.id))["reactions"] == [{"emoji": "👍", "count": 2}]

        await repos.messages.remove_reaction(message.id, "👍")
        updated = await repos.messages.remove_reaction(message.id, "👍")
        assert updated.reactions == []

    @pytest.mark.asyncio
    async def test_vote_and_unvote(self, repos):
        message = await repos.messages.create(poll_message())

        voted = await repos.messages.vote(message.id, 1, "u1")
        assert voted.get_poll().get_answer(1).voters == ["u1"]

        unvoted = await repos.messages.unvote(message.id, 1, "u1")
        assert unvoted.get_poll().get_answer(1).voters == []

    @pytest.mark.asyncio
    async def test_vote_beyond_limit_changes_nothing(self, repos):
        message = await repos.messages.create(poll_message())
        await repos.messages.vote(message.id, 1, "u1")

        with pytest.raises(ValidationException) as exc_info:
            await repos.messages.vote(message.id, 2, "u1")

        assert exc_info.value.identifier == message.id
        cached = await repos.messages.get_by_id(message.id)
        assert cached.get_poll().votes_of("u1") == 1

    @pytest.mark.asyncio
    async def test_vote_without_poll(self, repos):
        message = await repos.messages.create({"content": [{"type": "TEXT", "value": "hi"}]})

        with pytest.raises(ValidationException):
            await repos.messages.vote(message.id, 1, "u1")

    @pytest.mark.asyncio
    async def test_edit(self, repos):
        message = await repos.messages.create({"content": [{"type": "TEXT", "value": "helo"}]})

        edited = await repos.messages.edit(message.id, [{"type": "TEXT", "value": "hello"}])

        assert edited.content[0].value == "hello"
        assert len(edited.edit_history) == 1

    @pytest.mark.asyncio
    async def test_get_by_chat_and_replies(self, repos, store):
        store.seed("chats", [{"id": "chat1", "type": "GROUP"}, {"id": "chat2", "type": "GROUP"}])
        first = await repos.messages.create({"chat": "chat1", "content": [{"type": "TEXT", "value": "a"}]})
        await repos.messages.create({"chat": "chat2", "content": [{"type": "TEXT", "value": "b"}]})
        reply = await repos.messages.create({
            "chat": "chat1",
            "answer": first.id,
            "content": [{"type": "TEXT", "value": "c"}],
        })

        in_chat = await repos.messages.get_by_chat("chat1")
        replies = await repos.messages.get_replies(first.id)

        assert [m.id for m in in_chat] == [first.id, reply.id]
        assert [m.id for m in replies] == [reply.id]
        assert reply.answer["id"] == first.id

    @pytest.mark.asyncio
    async def test_helper_on_unknown_message(self, repos):
        with pytest.raises(NotFoundException):
            await repos.messages.add_reaction("m404", "👍")


class TestApprovalRepository:

    @pytest.mark.asyncio
    async def test_set_state(self, repos):
        blackboard = await repos.blackboards.create({
            "title": "Lost and found",
            "cover_image": "https://example.org/cover.png",
            "text": "Blue scarf",
        })
        assert isinstance(repos.blackboards, ApprovalRepository)
        assert blackboard.state == "SUGGESTED"

        approved = await repos.blackboards.set_state(blackboard.id, "APPROVED")

        assert approved.state == "APPROVED"
        assert [b.id for b in await repos.blackboards.get_by_state("APPROVED")] == [blackboard.id]
        assert await repos.blackboards.get_by_state("SUGGESTED") == []

    @pytest.mark.asyncio
    async def test_invalid_state(self, repos):
        blackboard = await repos.blackboards.create({
            "title": "Lost and found",
            "cover_image": "https://example.org/cover.png",
            "text": "Blue scarf",
        })

        with pytest.raises(ValidationException):
            await repos.blackboards.set_state(blackboard.id, "ARCHIVED")

        assert (await repos.blackboards.get_by_id(blackboard.id)).state == "SUGGESTED"
        assert await repos.blackboards.get_by_state("ARCHIVED") == []


class TestMembership:

    @pytest.mark.asyncio
    async def test_club_members(self, repos, store, user_data):
        await store.create_document("users", user_data("Ada"))
        club = await repos.clubs.create({"name": "Chess"})
        assert isinstance(repos.clubs, ClubRepository)

        joined = await repos.clubs.add_member(club.id, "u1")
        again = await repos.clubs.add_member(club.id, "u1")

        assert [m["id"] for m in joined.members] == ["u1"]
        assert len(again.members) == 1
        assert [c.id for c in await repos.clubs.get_clubs_of_user("u1")] == [club.id]

        left = await repos.clubs.remove_member(club.id, "u1")
        assert left.members == []
        assert await repos.clubs.get_clubs_of_user("u1") == []

    @pytest.mark.asyncio
    async def test_chat_targets(self, repos, store, user_data):
        await store.create_document("users", user_data("Ada"))
        chat = await repos.chats.create({"type": "PRIVATE"})
        assert isinstance(repos.chats, ChatRepository)

        await repos.chats.add_target(chat.id, "u1")

        assert [c.id for c in await repos.chats.get_chats_of_user("u1")] == [chat.id]
        assert (await store.get_document("chats", chat.id))["targets"] == ["u1"]

        removed = await repos.chats.remove_target(chat.id, "u1")
        assert removed.targets == []
