from typing import Optional
from uuid import UUID as PyUUID, uuid4
from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from swiftjobs.db.base import Base, TimestampMixin, JSONType


class JobSeeker(Base, TimestampMixin):
    __tablename__ = "job_seekers"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    resume: Mapped[str] = mapped_column(Text, nullable=False)
    resume_filename: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    resume_file_path: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    behavioral_answers: Mapped[list] = mapped_column(JSONType, default=list, nullable=False)

    # LLM-derived skills and traits, see SeekerAnalysis
    profile_analysis: Mapped[dict] = mapped_column(JSONType, default=dict, nullable=False)

    matches = relationship("Match", back_populates="job_seeker", cascade="all, delete-orphan")
