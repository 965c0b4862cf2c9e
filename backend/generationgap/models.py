from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes as camelCase for the browser clients, accepts either case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatMessage(CamelModel):
    role: str = Field(examples=["user", "assistant"])
    content: str


class ChatRequest(CamelModel):
    session_id: str = Field(min_length=1, description="Client-generated session identifier")
    message: str = Field(min_length=1)


class ChatResponse(CamelModel):
    session_id: str
    response: str
    history: List[ChatMessage] = Field(default_factory=list)


class ClearRequest(CamelModel):
    session_id: str = Field(min_length=1)


class MessageResponse(CamelModel):
    message: str


class HealthResponse(CamelModel):
    status: str = "ok"
    message: str = "GenerationGap API is running"


class FamilyMember(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: Literal["parent", "teen"]


class Family(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    parent: FamilyMember
    teen: FamilyMember
    created_at: str


class FamilyCreate(CamelModel):
    family_name: str = Field(min_length=1)
    parent_name: str = Field(min_length=1)
    teen_name: str = Field(min_length=1)


class FamilyResponse(CamelModel):
    family: Family
    message: Optional[str] = None


class JournalEntry(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    family_id: str
    author: str
    content: str
    mood: str
    entry_type: Literal["parent", "teen"]
    timestamp: str
    ai_insight: Optional[str] = None


class JournalEntryCreate(CamelModel):
    author: str = Field(min_length=1)
    content: str = Field(min_length=1)
    mood: str = Field(min_length=1)
    entry_type: Literal["parent", "teen"]


class JournalEntryResponse(CamelModel):
    entry: JournalEntry
    message: str


class JournalEntriesResponse(CamelModel):
    entries: List[JournalEntry] = Field(default_factory=list)
