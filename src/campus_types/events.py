from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, model_validator

from campus_types.base import ApprovalState, BaseEntity, EntityInterface, Reference


class EventInformationItem(BaseModel):
    emoji: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class EventInformation(BaseModel):
    title: str = Field(..., min_length=1)
    items: List[EventInformationItem] = Field(default_factory=list)


class TicketDetails(BaseModel):
    price: float = Field(..., ge=0)
    description: str = Field(..., min_length=1)
    amount: int = Field(..., ge=0, description="Number of tickets on sale")


class EventTickets(BaseModel):
    ticket_details: Optional[TicketDetails] = None
    sold: List[Reference] = Field(default_factory=list)


class Event(BaseEntity):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    host: str = Field(..., min_length=1)
    start_date: int = Field(..., description="Start as unix timestamp in milliseconds")
    end_date: int = Field(..., description="End as unix timestamp in milliseconds")
    information: List[EventInformation] = Field(default_factory=list)
    tickets: EventTickets = Field(default_factory=EventTickets)
    state: ApprovalState = "SUGGESTED"
    edit_history: List[Dict[str, Any]] = Field(default_factory=list)

    clubs: List[Reference] = Field(default_factory=list)
    subscribers: List[Reference] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def set_state(self, state: str) -> None:
        self.state = state


class EventTicket(BaseEntity):
    event: Optional[Reference] = None
    buyer: Optional[Reference] = None
    price: float = Field(..., ge=0)
    sale_date: int = Field(..., description="Sale time as unix timestamp in milliseconds")


class EventInterface(EntityInterface):
    name = "Event"
    model = Event


class EventTicketInterface(EntityInterface):
    name = "EventTicket"
    model = EventTicket
