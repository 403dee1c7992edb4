"""
Entity interfaces: per entity type configuration for the generic repository.

Each interface names the pydantic model, the document store collection, the
cache key and TTL, and the relation fields that population joins.
"""

from campus_backend.interfaces.base import BackendEntityInterface, InterfaceRegistry, Relation
from campus_backend.interfaces.blackboard import BlackboardInterface
from campus_backend.interfaces.chat import ChatInterface
from campus_backend.interfaces.club import ClubInterface
from campus_backend.interfaces.course import CourseInterface
from campus_backend.interfaces.event import EventInterface
from campus_backend.interfaces.event_ticket import EventTicketInterface
from campus_backend.interfaces.grade import GradeInterface
from campus_backend.interfaces.message import MessageInterface
from campus_backend.interfaces.school import SchoolInterface
from campus_backend.interfaces.school_class import SchoolClassInterface
from campus_backend.interfaces.setup_account import SetupAccountInterface
from campus_backend.interfaces.subject import SubjectInterface
from campus_backend.interfaces.user import UserInterface

ENTITY_INTERFACES = (
    UserInterface,
    ClubInterface,
    EventInterface,
    EventTicketInterface,
    BlackboardInterface,
    SchoolClassInterface,
    CourseInterface,
    GradeInterface,
    SubjectInterface,
    ChatInterface,
    MessageInterface,
    SchoolInterface,
    SetupAccountInterface,
)


def build_registry(interfaces=ENTITY_INTERFACES) -> InterfaceRegistry:
    registry = InterfaceRegistry(interfaces)
    registry.validate()
    return registry


default_registry = build_registry()

__all__ = [
    "BackendEntityInterface",
    "InterfaceRegistry",
    "Relation",
    "ENTITY_INTERFACES",
    "build_registry",
    "default_registry",
    "BlackboardInterface",
    "ChatInterface",
    "ClubInterface",
    "CourseInterface",
    "EventInterface",
    "EventTicketInterface",
    "GradeInterface",
    "MessageInterface",
    "SchoolInterface",
    "SchoolClassInterface",
    "SetupAccountInterface",
    "SubjectInterface",
    "UserInterface",
]
