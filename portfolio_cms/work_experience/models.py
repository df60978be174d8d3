"""Work experience model."""

from sqlalchemy import JSON, Column, String, Text

from ..database.base import Base, DocumentMixin


class WorkExperience(DocumentMixin, Base):
    __tablename__ = "work_experiences"

    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    company_logo = Column(String(1000), default="")
    location = Column(String(255), default="")
    period = Column(String(100), default="")
    description = Column(Text, default="")
    responsibilities = Column(JSON, default=list)
    technologies = Column(JSON, default=list)
