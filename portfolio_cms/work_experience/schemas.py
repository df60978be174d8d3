"""Work experience request/response schemas."""

from ..common.validation import DocumentOut, OptionalText, RequiredText, StringList, WireModel


class WorkExperienceIn(WireModel):
    title: RequiredText
    company: RequiredText
    location: OptionalText = ""
    period: OptionalText = ""
    description: OptionalText = ""
    responsibilities: StringList = []
    technologies: StringList = []


class WorkExperienceOut(DocumentOut):
    title: str
    company: str
    company_logo: str | None = ""
    location: str | None = ""
    period: str | None = ""
    description: str | None = ""
    responsibilities: list[str] = []
    technologies: list[str] = []
