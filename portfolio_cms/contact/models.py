"""Contact model (singleton collection)."""

from sqlalchemy import JSON, Column, String

from ..database.base import Base, DocumentMixin


class Contact(DocumentMixin, Base):
    __tablename__ = "contact"

    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    social_links = Column(JSON, default=dict)
