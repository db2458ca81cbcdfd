from typing import Optional
from uuid import UUID as PyUUID, uuid4
from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from swiftjobs.db.base import Base, TimestampMixin


class Employer(Base, TimestampMixin):
    __tablename__ = "employers"

    id: Mapped[PyUUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    company_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    website: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    company_size: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    jobs = relationship("Job", back_populates="employer")
