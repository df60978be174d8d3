"""Profile request/response schemas."""

from typing import Annotated

from pydantic import BeforeValidator, Field

from ..common.validation import DocumentOut, RequiredText, StringList, WireModel
from .models import ProfileStatus


def _blank_status(value: object) -> object:
    return ProfileStatus.OPEN_TO_WORK if value in (None, "") else value


def _blank_years(value: object) -> object:
    return 1 if value in (None, "") else value


class ProfileIn(WireModel):
    full_name: RequiredText
    title: RequiredText
    tagline: RequiredText
    introduction: RequiredText
    key_skills: StringList = []
    status: Annotated[ProfileStatus, BeforeValidator(_blank_status)] = ProfileStatus.OPEN_TO_WORK
    years_of_experience: Annotated[int, BeforeValidator(_blank_years), Field(ge=0)] = 1


class ProfileOut(DocumentOut):
    full_name: str
    title: str
    tagline: str
    introduction: str
    key_skills: list[str] = []
    status: ProfileStatus
    years_of_experience: int | None = 1
    image: str | None = ""
    cv: str | None = ""
