"""Tests for relation population and dehydration."""

import pytest

from campus_backend.exceptions import DatabaseException
from campus_backend.interfaces import ClubInterface, EventInterface, UserInterface, default_registry
from campus_backend.repositories import Populator, Repositories, dehydrate
from campus_backend.tests.doubles import CountingStore

pytestmark = pytest.mark.unit


def event_document(event_id, **fields):
    return {
        "id": event_id,
        "title": "Summer fair",
        "description": "Cake and games",
        "location": "Schoolyard",
        "host": "Parents council",
        "start_date": 1_700_000_000_000,
        "end_date": 1_700_000_360_000,
        **fields,
    }


@pytest.fixture
def school(store):
    """One grade with one class holding one user."""
    store.seed("grades", [{"id": "g1", "level": 7, "classes": ["cl1"]}])
    store.seed("classes", [{"id": "cl1", "specified_grade": "b", "grade": "g1", "members": ["u1"]}])
    store.seed("users", [{"id": "u1", "first_name": "Ada", "last_name": "Lovelace", "classes": ["cl1"]}])
    return store


class BrokenStore(CountingStore):
    async def get_document(self, collection, document_id):
        raise RuntimeError("connection reset")


class TestPopulate:

    @pytest.mark.asyncio
    async def test_relations_are_replaced_by_records(self, repos, school):
        user = await repos.users.get_by_id("u1")

        school_class = user.classes[0]
        assert school_class["id"] == "cl1"
        assert school_class["specified_grade"] == "b"
        assert school_class["grade"]["level"] == 7
        assert school_class["members"][0]["first_name"] == "Ada"

    @pytest.mark.asyncio
    async def test_nested_records_keep_ids_at_last_level(self, repos, school):
        user = await repos.users.get_by_id("u1")

        school_class = user.classes[0]
        assert school_class["grade"]["classes"] == ["cl1"]
        assert school_class["members"][0]["classes"] == ["cl1"]

    @pytest.mark.asyncio
    async def test_depth_is_configurable(self, school, cache):
        shallow = Repositories(school, cache=cache, depth=1)

        user = await shallow.users.get_by_id("u1")

        assert user.classes[0]["id"] == "cl1"
        assert user.classes[0]["members"] == ["u1"]
        assert user.classes[0]["grade"] == "g1"

    @pytest.mark.asyncio
    async def test_unset_single_relation_stays_none(self, repos, store):
        store.seed("courses", [{"id": "co1"}])

        course = await repos["Course"].get_by_id("co1")

        assert course.teacher is None
        assert course.members == []

    @pytest.mark.asyncio
    async def test_dotted_relation_path(self, repos, store):
        store.seed("events", [event_document("e1")])
        store.seed("clubs", [{"id": "club1", "name": "Chess", "details": {"events": ["e1"]}}])

        club = await repos.clubs.get_by_id("club1")

        assert club.details.events[0]["title"] == "Summer fair"
        assert club.details.location == "Club location"

    @pytest.mark.asyncio
    async def test_relation_inside_nested_list_object(self, repos, school):
        school.seed("event_tickets", [
            {"id": "t1", "event": "e1", "buyer": "u1", "price": 5, "sale_date": 1_700_000_000_000},
        ])
        school.seed("events", [event_document("e1", tickets={"sold": ["t1"]})])

        event = await repos.events.get_by_id("e1")

        ticket = event.tickets.sold[0]
        assert ticket["buyer"]["first_name"] == "Ada"
        assert ticket["event"]["tickets"]["sold"] == ["t1"]

    @pytest.mark.asyncio
    async def test_missing_reference(self, repos, store, cache):
        store.seed("users", [{"id": "u1", "first_name": "Ada", "last_name": "Lovelace", "classes": ["cl404"]}])

        with pytest.raises(DatabaseException) as exc_info:
            await repos.users.get_all()

        assert exc_info.value.error_code == "DB_005"
        assert exc_info.value.identifier == "u1"
        assert "cl404" in exc_info.value.message
        assert cache.get("users") is None

    @pytest.mark.asyncio
    async def test_every_missing_reference_is_awaited(self, store):
        store.seed("users", [{"id": "u1", "first_name": "Ada", "last_name": "Lovelace", "classes": ["cl8", "cl9"]}])
        populator = Populator(store, default_registry)
        document = await store.get_document("users", "u1")
        store.document_reads.clear()

        with pytest.raises(DatabaseException) as exc_info:
            await populator.populate(document, UserInterface)

        assert "cl8" in exc_info.value.message
        assert dict(store.document_reads) == {"classes": 2}

    @pytest.mark.asyncio
    async def test_populate_many_keeps_order(self, school):
        school.seed("users", [{"id": "u2", "first_name": "Grace", "last_name": "Hopper", "classes": ["cl1"]}])
        documents = await school.get_all_documents("users")
        populator = Populator(school, default_registry, depth=1)

        populated = await populator.populate_many(documents, UserInterface)

        assert [d["id"] for d in populated] == ["u1", "u2"]
        assert all(d["classes"][0]["id"] == "cl1" for d in populated)

    @pytest.mark.asyncio
    async def test_store_error_is_wrapped(self, cache):
        store = BrokenStore()
        store.seed("users", [{"id": "u1", "first_name": "Ada", "last_name": "Lovelace", "classes": ["cl1"]}])

        with pytest.raises(DatabaseException) as exc_info:
            await Repositories(store, cache=cache).users.get_all()

        assert exc_info.value.error_code == "DB_005"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_document_is_not_modified(self, school):
        document = await school.get_document("users", "u1")
        populator = Populator(school, default_registry)

        populated = await populator.populate(document, UserInterface)

        assert document["classes"] == ["cl1"]
        assert populated["classes"][0]["id"] == "cl1"

    @pytest.mark.asyncio
    async def test_one_fetch_per_reference(self, school):
        populator = Populator(school, default_registry, depth=1)
        document = await school.get_document("users", "u1")
        school.document_reads.clear()

        await populator.populate(document, UserInterface)

        assert dict(school.document_reads) == {"classes": 1}

    @pytest.mark.asyncio
    async def test_update_stores_ids_only(self, repos, school):
        user = await repos.users.get_by_id("u1")

        updated = await repos.users.update("u1", user.model_copy(update={"last_name": "King"}))

        stored = await school.get_document("users", "u1")
        assert stored["classes"] == ["cl1"]
        assert stored["last_name"] == "King"
        assert updated.classes[0]["id"] == "cl1"


class TestDehydrate:

    def test_collapses_populated_records(self):
        data = {
            "first_name": "Ada",
            "classes": [{"id": "cl1", "members": [{"id": "u1"}]}, "cl2"],
            "clubs": [],
        }

        result = dehydrate(data, UserInterface)

        assert result["classes"] == ["cl1", "cl2"]
        assert result["clubs"] == []
        assert data["classes"][0]["id"] == "cl1"

    def test_dotted_and_single_relations(self):
        data = {
            "name": "Chess",
            "details": {"location": "Room 4", "events": [{"id": "e1"}]},
            "chat": {"id": "chat1", "type": "CLUB"},
            "members": ["u1"],
        }

        result = dehydrate(data, ClubInterface)

        assert result["details"] == {"location": "Room 4", "events": ["e1"]}
        assert result["chat"] == "chat1"
        assert result["members"] == ["u1"]

    def test_missing_containers_are_skipped(self):
        result = dehydrate({"title": "Fair", "tickets": None}, EventInterface)

        assert result == {"title": "Fair", "tickets": None}
