"""Education request/response schemas."""

from ..common.validation import DocumentOut, OptionalText, RequiredText, StringList, WireModel


class EducationIn(WireModel):
    degree: RequiredText
    institution: RequiredText
    location: OptionalText = ""
    period: OptionalText = ""
    description: OptionalText = ""
    courses: StringList = []
    options: OptionalText = ""


class EducationOut(DocumentOut):
    degree: str
    institution: str
    location: str | None = ""
    period: str | None = ""
    description: str | None = ""
    courses: list[str] = []
    options: str | None = ""
