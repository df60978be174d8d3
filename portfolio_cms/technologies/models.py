"""Technology model and category enum."""

import enum

from sqlalchemy import Column, String
from sqlalchemy import Enum as SQLEnum

from ..database.base import Base, DocumentMixin


class TechnologyCategory(enum.StrEnum):
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    MOBILE = "Mobile Development"
    AI_ML = "AI & Machine Learning"
    DATA_SCIENCE = "Data Science"
    DEVOPS = "DevOps"
    DATABASE = "Database"
    IOT = "IoT"
    UI_UX = "UI/UX Design"
    SCIENTIFIC = "Scientific Computing"
    LANGUAGES = "Programming Languages"


class Technology(DocumentMixin, Base):
    __tablename__ = "technologies"

    name = Column(String(255), nullable=False, unique=True)
    category = Column(
        SQLEnum(TechnologyCategory, values_callable=lambda e: [c.value for c in e], name="technology_category"),
        nullable=False,
    )
    # NULL when no icon was uploaded, so the unique index only covers real URLs
    icon = Column(String(1000), nullable=True, unique=True)
