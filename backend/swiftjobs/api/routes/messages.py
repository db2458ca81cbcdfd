import logging
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from swiftjobs.api.dependencies.database import get_db
from swiftjobs.schemas.message import (
    MessageSendRequest,
    MessageSendResponse,
    MessageListResponse,
)
from swiftjobs.services.exceptions import NotFoundError
from swiftjobs.services.message_service import send_message, list_messages

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/send", response_model=MessageSendResponse)
def send(request: MessageSendRequest, db: Session = Depends(get_db)):
    """
    Send a message on a match between a job seeker and a job.
    """
    try:
        record = send_message(db, request.match_id, request.sender, request.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error sending message: {str(e)}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to send message")

    return MessageSendResponse(message_id=record.id)


@router.get("/{match_id}", response_model=MessageListResponse)
def get_conversation(match_id: UUID, db: Session = Depends(get_db)):
    """
    Get all messages on a match, oldest first.
    """
    try:
        messages = list_messages(db, match_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return MessageListResponse(messages=messages)
