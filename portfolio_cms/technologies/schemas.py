"""Technology request/response schemas."""

from ..common.validation import DocumentOut, OptionalText, RequiredText, WireModel
from .models import TechnologyCategory


class TechnologyIn(WireModel):
    name: RequiredText
    category: TechnologyCategory


class TechnologyOut(DocumentOut):
    name: str
    category: TechnologyCategory
    icon: OptionalText = ""
