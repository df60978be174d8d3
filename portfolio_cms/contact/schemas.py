"""Contact request/response schemas."""

from typing import Annotated

from pydantic import BeforeValidator, Field

from ..common.validation import DocumentOut, OptionalText, RequiredText, WireModel


class SocialLinks(WireModel):
    instagram: OptionalText = ""
    facebook: OptionalText = ""
    twitter: OptionalText = ""
    linkedin: OptionalText = ""
    youtube: OptionalText = ""
    github: OptionalText = ""


def _none_to_empty(value: object) -> object:
    return {} if value is None else value


class ContactIn(WireModel):
    email: RequiredText
    phone: RequiredText
    social_links: Annotated[SocialLinks, BeforeValidator(_none_to_empty)] = Field(default_factory=SocialLinks)


class ContactOut(DocumentOut):
    email: str
    phone: str
    social_links: Annotated[SocialLinks, BeforeValidator(_none_to_empty)] = Field(default_factory=SocialLinks)
