from datetime import datetime
from uuid import UUID as PyUUID, uuid4
from sqlalchemy import String, Text, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func
from swiftjobs.db.base import Base


class Message(Base):
    __tablename__ = "messages"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    match_id: Mapped[PyUUID] = mapped_column(
        Uuid,
        ForeignKey("matches.id", ondelete="CASCADE"),
        nullable=False
    )

    sender: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    sent_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    match = relationship("Match", back_populates="messages")

    __table_args__ = (
        Index("idx_messages_match_id_sent_at", "match_id", "sent_at"),
    )
