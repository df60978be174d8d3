"""Project request/response schemas.

Multipart clients send `keyFeatures` as a JSON-encoded string; JSON input may
carry the list directly.
"""

import json
from typing import Annotated

from pydantic import BeforeValidator

from ..common.validation import DocumentOut, OptionalText, RequiredText, WireModel


class KeyFeature(WireModel):
    title: RequiredText
    description: OptionalText = ""


def parse_features(value: object) -> object:
    if value is None:
        return []
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            raise ValueError("Invalid keyFeatures format") from None
    return value


class ProjectIn(WireModel):
    title: RequiredText
    description: RequiredText
    domain: RequiredText
    live_url: OptionalText = ""
    github_url: OptionalText = ""
    key_features: Annotated[list[KeyFeature], BeforeValidator(parse_features)] = []


class ProjectOut(DocumentOut):
    title: str
    description: str
    domain: str
    thumbnail: str | None = ""
    images: list[str] = []
    icon_lists: list[str] = []
    live_url: str | None = ""
    github_url: str | None = ""
    key_features: list[KeyFeature] = []
