"""Testimonial request/response schemas."""

from ..common.validation import DocumentOut, RequiredText, WireModel


class TestimonialIn(WireModel):
    quote: RequiredText
    author_name: RequiredText
    author_position: RequiredText


class TestimonialOut(DocumentOut):
    quote: str
    author_name: str
    author_position: str
    author_image: str | None = ""
