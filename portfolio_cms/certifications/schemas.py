"""Certification request/response schemas."""

import datetime as dt

from pydantic import field_validator

from ..common.validation import DocumentOut, OptionalText, RequiredText, WireModel


def parse_date(value: str) -> dt.date:
    """Accept a calendar date or a full ISO timestamp."""
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return dt.datetime.fromisoformat(value).date()
    except ValueError:
        raise ValueError("Invalid date format") from None


class CertificationIn(WireModel):
    name: RequiredText
    provider: RequiredText
    date: RequiredText
    certificate_url: RequiredText
    details: OptionalText = ""

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: str) -> str:
        return parse_date(v).isoformat()


class CertificationOut(DocumentOut):
    name: str
    provider: str
    date: dt.date
    certificate_url: str
    details: str | None = ""
