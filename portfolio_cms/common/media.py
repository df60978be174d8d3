"""Attachment handling around the media host.

Uploads are read and checked before anything is pushed, so a rejected file
never reaches the host. Removing old objects is best-effort: failures are
logged and the record operation carries on.
"""

import logging
from dataclasses import dataclass, field

from fastapi import UploadFile

from ..config import settings
from ..exceptions import PayloadInvalid
from ..integrations.media import MediaHost, MediaHostError, public_id_from_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaSlot:
    """Where one media field lives on the host."""

    folder: str
    resource_type: str = "image"
    allowed_types: frozenset[str] = field(default_factory=frozenset)
    rejection: str = "Unsupported file type"


@dataclass
class PendingUpload:
    data: bytes
    content_type: str
    filename: str


def prepare_upload(file: UploadFile | None, slot: MediaSlot) -> PendingUpload | None:
    """Read an attached file; None when the field was left empty."""
    if file is None or not file.filename:
        return None
    data = file.file.read(settings.max_upload_bytes + 1)
    if not data:
        return None
    if slot.allowed_types and file.content_type not in slot.allowed_types:
        raise PayloadInvalid(slot.rejection)
    if len(data) > settings.max_upload_bytes:
        raise PayloadInvalid(f"File {file.filename} exceeds the maximum upload size")
    return PendingUpload(data, file.content_type or "application/octet-stream", file.filename)


def prepare_uploads(files: list[UploadFile] | None, slot: MediaSlot) -> list[PendingUpload]:
    pending = (prepare_upload(f, slot) for f in files or [])
    return [p for p in pending if p is not None]


def push_upload(media: MediaHost, pending: PendingUpload | None, slot: MediaSlot) -> str:
    """Upload and return the public URL, or "" when nothing was attached."""
    if pending is None:
        return ""
    return media.upload(pending.data, pending.content_type, slot.folder, slot.resource_type)


def replace_media(media: MediaHost, pending: PendingUpload | None, current: str | None, slot: MediaSlot) -> str:
    """Upload the new file and drop the old object; keep `current` when nothing was attached."""
    if pending is None:
        return current or ""
    url = push_upload(media, pending, slot)
    if current:
        discard_media(media, current, slot)
    return url


def discard_media(media: MediaHost, url: str | None, slot: MediaSlot) -> None:
    if not url:
        return
    public_id = public_id_from_url(url, slot.folder, keep_extension=slot.resource_type == "raw")
    if not public_id:
        logger.warning("Cannot derive media id from %s", url)
        return
    try:
        media.destroy(public_id, slot.resource_type)
    except MediaHostError:
        logger.exception("Failed to delete media %s", public_id)
