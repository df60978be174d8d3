"""Education model."""

from sqlalchemy import JSON, Column, String, Text

from ..database.base import Base, DocumentMixin


class Education(DocumentMixin, Base):
    __tablename__ = "education"

    degree = Column(String(255), nullable=False)
    institution = Column(String(255), nullable=False)
    location = Column(String(255), default="")
    period = Column(String(100), default="")
    description = Column(Text, default="")
    courses = Column(JSON, default=list)
    options = Column(Text, default="")
