"""Work experience service."""

import logging

from sqlalchemy.orm import Session

from ..common.identity import next_id
from ..common.media import MediaSlot, PendingUpload, discard_media, push_upload, replace_media
from ..integrations.media import MediaHost
from .models import WorkExperience
from .schemas import WorkExperienceIn

logger = logging.getLogger(__name__)

COMPANY_LOGO = MediaSlot("company/logos")


def create_work_experience(
    db: Session, media: MediaHost, payload: WorkExperienceIn, logo: PendingUpload | None
) -> WorkExperience:
    logo_url = push_upload(media, logo, COMPANY_LOGO)
    experience = WorkExperience(id=next_id(db, WorkExperience), company_logo=logo_url, **payload.model_dump())
    db.add(experience)
    db.flush()
    logger.info("Work experience created: id=%d, company=%s", experience.id, experience.company)
    return experience


def update_work_experience(
    db: Session,
    media: MediaHost,
    experience: WorkExperience,
    payload: WorkExperienceIn,
    logo: PendingUpload | None,
) -> WorkExperience:
    for key, value in payload.model_dump().items():
        setattr(experience, key, value)
    experience.company_logo = replace_media(media, logo, experience.company_logo, COMPANY_LOGO)
    db.flush()
    logger.info("Work experience updated: id=%d", experience.id)
    return experience


def delete_work_experience(db: Session, media: MediaHost, experience: WorkExperience) -> None:
    discard_media(media, experience.company_logo, COMPANY_LOGO)
    db.delete(experience)
    db.flush()
    logger.info("Work experience deleted: id=%d", experience.id)
