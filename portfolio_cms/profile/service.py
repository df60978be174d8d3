"""Profile service. Only one profile document may exist."""

import logging

from sqlalchemy.orm import Session

from ..common.identity import first, next_id
from ..common.media import MediaSlot, PendingUpload, discard_media, push_upload, replace_media
from ..exceptions import PayloadInvalid
from ..integrations.media import MediaHost
from .models import Profile
from .schemas import ProfileIn

logger = logging.getLogger(__name__)

IMAGE = MediaSlot("users/images")
CV = MediaSlot(
    "users/cvs",
    resource_type="raw",
    allowed_types=frozenset(
        {
            "application/pdf",
            "application/msword",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        }
    ),
    rejection="Only PDF, DOC, and DOCX files are allowed for CV!",
)


def _apply(profile: Profile, payload: ProfileIn) -> None:
    for key, value in payload.model_dump().items():
        setattr(profile, key, value)


def create_profile(
    db: Session,
    media: MediaHost,
    payload: ProfileIn,
    image: PendingUpload | None,
    cv: PendingUpload | None,
) -> Profile:
    if first(db, Profile) is not None:
        raise PayloadInvalid("A user profile already exists. Only one profile is allowed.")
    profile = Profile(id=next_id(db, Profile))
    _apply(profile, payload)
    profile.image = push_upload(media, image, IMAGE)
    profile.cv = push_upload(media, cv, CV)
    db.add(profile)
    db.flush()
    logger.info("Profile created: id=%d, name=%s", profile.id, profile.full_name)
    return profile


def update_profile(
    db: Session,
    media: MediaHost,
    profile: Profile,
    payload: ProfileIn,
    image: PendingUpload | None,
    cv: PendingUpload | None,
) -> Profile:
    _apply(profile, payload)
    profile.image = replace_media(media, image, profile.image, IMAGE)
    profile.cv = replace_media(media, cv, profile.cv, CV)
    db.flush()
    logger.info("Profile updated: id=%d", profile.id)
    return profile


def delete_profile(db: Session, media: MediaHost, profile: Profile) -> None:
    discard_media(media, profile.cv, CV)
    discard_media(media, profile.image, IMAGE)
    db.delete(profile)
    db.flush()
    logger.info("Profile deleted: id=%d", profile.id)
