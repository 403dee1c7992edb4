from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from campus_types.base import BaseEntity, EntityInterface, Reference


class PollAnswer(BaseModel):
    id: int
    emoji: str = Field(..., min_length=1)
    option_name: str = Field(..., min_length=1)
    voters: List[str] = Field(default_factory=list, description="Ids of voting users")

    def vote(self, user_id: str) -> None:
        if user_id in self.voters:
            raise ValueError(f"User {user_id} already voted for answer {self.id}")
        self.voters.append(user_id)

    def unvote(self, user_id: str) -> None:
        if user_id not in self.voters:
            raise ValueError(f"User {user_id} has not voted for answer {self.id}")
        self.voters.remove(user_id)


class Poll(BaseModel):
    question: str = Field(..., min_length=1)
    anonymous: bool = False
    answers: List[PollAnswer] = Field(..., min_length=1)
    max_votes_per_user: int = Field(1, ge=1)

    def get_answer(self, answer_id: int) -> PollAnswer:
        for answer in self.answers:
            if answer.id == answer_id:
                return answer
        raise ValueError(f"Poll has no answer with id {answer_id}")

    def votes_of(self, user_id: str) -> int:
        return sum(1 for answer in self.answers if user_id in answer.voters)

    def vote(self, answer_id: int, user_id: str) -> None:
        answer = self.get_answer(answer_id)
        if self.votes_of(user_id) >= self.max_votes_per_user:
            raise ValueError(
                f"User {user_id} exceeded the limit of {self.max_votes_per_user} vote(s)"
            )
        answer.vote(user_id)

    def unvote(self, answer_id: int, user_id: str) -> None:
        self.get_answer(answer_id).unvote(user_id)


class TextContent(BaseModel):
    type: Literal["TEXT"] = "TEXT"
    value: str = Field(..., min_length=1)


class ImageContent(BaseModel):
    type: Literal["IMAGE"] = "IMAGE"
    value: str = Field(..., min_length=1, description="Image URL")


class VideoContent(BaseModel):
    type: Literal["VIDEO"] = "VIDEO"
    value: str = Field(..., min_length=1, description="Video URL")


class FileContent(BaseModel):
    type: Literal["FILE"] = "FILE"
    value: str = Field(..., min_length=1, description="File URL")


class PollContent(BaseModel):
    type: Literal["POLL"] = "POLL"
    value: Poll


MessageContent = Annotated[
    Union[TextContent, ImageContent, VideoContent, FileContent, PollContent],
    Field(discriminator="type"),
]


class MessageReaction(BaseModel):
    emoji: str = Field(..., min_length=1)
    count: int = Field(1, ge=0)


class Message(BaseEntity):
    chat: Optional[Reference] = None
    author: Optional[Reference] = None
    content: List[MessageContent] = Field(..., min_length=1)
    reactions: List[MessageReaction] = Field(default_factory=list)
    answer: Optional[Reference] = Field(None, description="Message this one replies to")
    edit_history: List[List[MessageContent]] = Field(default_factory=list)

    def get_reaction(self, emoji: str) -> Optional[MessageReaction]:
        for reaction in self.reactions:
            if reaction.emoji == emoji:
                return reaction
        return None

    def add_reaction(self, emoji: str) -> MessageReaction:
        reaction = self.get_reaction(emoji)
        if reaction is None:
            reaction = MessageReaction(emoji=emoji, count=1)
            self.reactions.append(reaction)
        else:
            reaction.count += 1
        return reaction

    def remove_reaction(self, emoji: str) -> None:
        reaction = self.get_reaction(emoji)
        if reaction is None:
            return
        reaction.count -= 1
        if reaction.count <= 0:
            self.reactions.remove(reaction)

    def edit(self, content: List[MessageContent]) -> None:
        previous = list(self.content)
        self.content = content
        self.edit_history.append(previous)

    def get_poll(self) -> Poll:
        for item in self.content:
            if isinstance(item, PollContent):
                return item.value
        raise ValueError("Message does not contain a poll")

    def vote(self, answer_id: int, user_id: str) -> None:
        self.get_poll().vote(answer_id, user_id)

    def unvote(self, answer_id: int, user_id: str) -> None:
        self.get_poll().unvote(answer_id, user_id)


class MessageInterface(EntityInterface):
    name = "Message"
    model = Message
