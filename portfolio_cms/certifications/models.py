"""Certification model."""

from sqlalchemy import Column, Date, String, Text

from ..database.base import Base, DocumentMixin


class Certification(DocumentMixin, Base):
    __tablename__ = "certifications"

    name = Column(String(255), nullable=False)
    provider = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    certificate_url = Column(String(1000), nullable=False)
    details = Column(Text, default="")
