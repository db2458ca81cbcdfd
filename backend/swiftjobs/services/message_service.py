import logging
from datetime import datetime, timezone
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from swiftjobs.db.models.match import Match
from swiftjobs.db.models.message import Message
from swiftjobs.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _get_match(db: Session, match_id: UUID) -> Match:
    match = db.query(Match).filter(Match.id == match_id).first()
    if not match:
        raise NotFoundError("Match not found")
    return match


def send_message(db: Session, match_id: UUID, sender: str, message: str) -> Message:
    """Record a message between the two sides of a match."""
    _get_match(db, match_id)

    record = Message(
        match_id=match_id,
        sender=sender,
        message=message,
        sent_at=datetime.now(timezone.utc)
    )

    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info(
        "message_sent",
        extra={"message_id": str(record.id), "match_id": str(match_id), "sender": sender}
    )

    return record


def list_messages(db: Session, match_id: UUID) -> List[Message]:
    """Messages for a match, oldest first."""
    _get_match(db, match_id)
    return (
        db.query(Message)
        .filter(Message.match_id == match_id)
        .order_by(Message.sent_at.asc())
        .all()
    )
