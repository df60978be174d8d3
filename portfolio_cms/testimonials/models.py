"""Testimonial model."""

from sqlalchemy import Column, String, Text

from ..database.base import Base, DocumentMixin


class Testimonial(DocumentMixin, Base):
    __tablename__ = "testimonials"

    quote = Column(Text, nullable=False)
    author_name = Column(String(255), nullable=False)
    author_position = Column(String(255), nullable=False)
    author_image = Column(String(1000), default="")
