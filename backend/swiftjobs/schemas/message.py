from datetime import datetime
from typing import List
from uuid import UUID
from pydantic import Field

from swiftjobs.schemas.base import CamelModel


class MessageSendRequest(CamelModel):
    match_id: UUID
    message: str = Field(..., min_length=1, max_length=10000)
    sender: str = Field(..., min_length=1, max_length=255)


class MessageSendResponse(CamelModel):
    success: bool = True
    message_id: UUID


class MessageResponse(CamelModel):
    id: UUID
    match_id: UUID
    sender: str
    message: str
    sent_at: datetime


class MessageListResponse(CamelModel):
    messages: List[MessageResponse]
