from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from roadtrip_ai.models.domain import AdvisorRequest, Message, Role


class AskRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    location: Optional[str] = None
    duration: Optional[int] = None
    budget: Optional[Union[str, float]] = None
    travel_style: Optional[str] = Field(None, alias="travelStyle")
    interests: List[str] = Field(default_factory=list)
    include_weather: bool = Field(True, alias="includeWeather")
    conversation_id: Optional[str] = Field(None, alias="conversationId")

    def to_domain(self) -> AdvisorRequest:
        return AdvisorRequest(
            query=self.prompt,
            location=self.location,
            duration=self.duration,
            budget=None if self.budget is None else str(self.budget),
            travel_style=self.travel_style,
            interests=list(self.interests),
            include_weather=self.include_weather,
            conversation_id=self.conversation_id,
        )


class SaveMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: Optional[Role] = None
    content: Optional[str] = None
    conversation_id: Optional[str] = Field(None, alias="conversationId")


class MessageSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    role: Role
    content: str
    created_at: datetime = Field(alias="createdAt")
    conversation_id: str = Field(alias="conversationId")

    @classmethod
    def from_domain(cls, obj: Message) -> "MessageSchema":
        return cls(
            id=obj.id,
            role=obj.role,
            content=obj.content,
            created_at=obj.created_at,
            conversation_id=obj.conversation_id,
        )


class SaveMessageResponse(BaseModel):
    success: bool
    message: MessageSchema


class DeleteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    deleted_count: int = Field(alias="deletedCount")
    message: Optional[str] = None
