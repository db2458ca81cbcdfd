from typing import Optional
from uuid import UUID as PyUUID, uuid4
from sqlalchemy import String, Text, Boolean, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from swiftjobs.db.base import Base, TimestampMixin, JSONType


class Job(Base, TimestampMixin):
    __tablename__ = "jobs"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    employer_id: Mapped[Optional[PyUUID]] = mapped_column(
        Uuid,
        ForeignKey("employers.id", ondelete="SET NULL"),
        nullable=True
    )

    # Posting details as submitted
    company: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    job_title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    preferences: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # LLM-derived requirements, see JobAnalysis
    job_analysis: Mapped[dict] = mapped_column(JSONType, default=dict, nullable=False)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    employer = relationship("Employer", back_populates="jobs")
    matches = relationship("Match", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_jobs_employer_id", "employer_id"),
    )
