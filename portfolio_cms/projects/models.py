"""Project model."""

from sqlalchemy import JSON, Column, String, Text

from ..database.base import Base, DocumentMixin


class Project(DocumentMixin, Base):
    __tablename__ = "projects"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    domain = Column(String(255), nullable=False)
    thumbnail = Column(String(1000), default="")
    images = Column(JSON, default=list)
    icon_lists = Column(JSON, default=list)
    live_url = Column(String(1000), default="")
    github_url = Column(String(1000), default="")
    key_features = Column(JSON, default=list)
