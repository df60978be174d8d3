"""Profile model (singleton collection) and availability status enum."""

import enum

from sqlalchemy import JSON, Column, Integer, String, Text
from sqlalchemy import Enum as SQLEnum

from ..database.base import Base, DocumentMixin


class ProfileStatus(enum.StrEnum):
    SEEKING = "Seeking New Career Opportunities"
    OPEN_TO_WORK = "Open to Work"
    FREELANCING = "Freelancing"
    EMPLOYED = "Employed"
    COLLABORATION = "Available for Collaboration"
    PERSONAL_PROJECTS = "Working on Personal Projects"
    INTERNING = "Interning"
    EXPLORING = "Exploring New Technologies"
    UNAVAILABLE = "Unavailable"
    REMOTE_ONLY = "Remote Only"
    CONTRACT_ONLY = "Contract-Based Work Only"


class Profile(DocumentMixin, Base):
    __tablename__ = "profiles"

    full_name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    tagline = Column(String(500), nullable=False)
    introduction = Column(Text, nullable=False)
    key_skills = Column(JSON, default=list)
    status = Column(
        SQLEnum(ProfileStatus, values_callable=lambda e: [s.value for s in e], name="profile_status"),
        default=ProfileStatus.OPEN_TO_WORK,
        nullable=False,
    )
    years_of_experience = Column(Integer, default=1)
    image = Column(String(1000), default="")
    cv = Column(String(1000), default="")
