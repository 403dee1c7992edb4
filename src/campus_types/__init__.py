"""
Entity data types for the campus school-management application.

These pydantic models describe the documents kept in the document store.
Relation fields hold bare ids until the backend populates them.
"""

from campus_types.base import BaseEntity, EntityInterface, Reference, reference_id
from campus_types.blackboards import Blackboard
from campus_types.chats import Chat
from campus_types.clubs import Club, ClubDetails, ClubRequirement
from campus_types.courses import Course
from campus_types.events import Event, EventInformation, EventTicket, EventTickets, TicketDetails
from campus_types.grades import Grade
from campus_types.messages import (
    Message,
    MessageReaction,
    Poll,
    PollAnswer,
    PollContent,
    TextContent,
)
from campus_types.school_classes import SchoolClass
from campus_types.schools import School, SetupAccount
from campus_types.subjects import Subject
from campus_types.users import User

__all__ = [
    "BaseEntity",
    "EntityInterface",
    "Reference",
    "reference_id",
    "Blackboard",
    "Chat",
    "Club",
    "ClubDetails",
    "ClubRequirement",
    "Course",
    "Event",
    "EventInformation",
    "EventTicket",
    "EventTickets",
    "TicketDetails",
    "Grade",
    "Message",
    "MessageReaction",
    "Poll",
    "PollAnswer",
    "PollContent",
    "TextContent",
    "SchoolClass",
    "School",
    "SetupAccount",
    "Subject",
    "User",
]
