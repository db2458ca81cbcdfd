from uuid import UUID as PyUUID, uuid4
from sqlalchemy import Integer, Text, ForeignKey, Index, CheckConstraint, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from swiftjobs.db.base import Base, TimestampMixin


class Match(Base, TimestampMixin):
    __tablename__ = "matches"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    job_seeker_id: Mapped[PyUUID] = mapped_column(
        Uuid,
        ForeignKey("job_seekers.id", ondelete="CASCADE"),
        nullable=False
    )
    job_id: Mapped[PyUUID] = mapped_column(
        Uuid,
        ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False
    )

    score: Mapped[int] = mapped_column(Integer, nullable=False)
    breakdown: Mapped[str] = mapped_column(Text, nullable=False)

    job_seeker = relationship("JobSeeker", back_populates="matches")
    job = relationship("Job", back_populates="matches")
    messages = relationship("Message", back_populates="match", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint(
            "score >= 0 AND score <= 100",
            name="chk_match_score"
        ),
        UniqueConstraint("job_seeker_id", "job_id", name="uq_matches_seeker_job"),
        Index("idx_matches_job_id", "job_id"),
    )
