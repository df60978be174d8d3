"""Education service."""

import logging

from sqlalchemy.orm import Session

from ..common.identity import next_id
from .models import Education
from .schemas import EducationIn

logger = logging.getLogger(__name__)


def create_education(db: Session, payload: EducationIn) -> Education:
    entry = Education(id=next_id(db, Education), **payload.model_dump())
    db.add(entry)
    db.flush()
    logger.info("Education created: id=%d, institution=%s", entry.id, entry.institution)
    return entry


def update_education(db: Session, entry: Education, payload: EducationIn) -> Education:
    for key, value in payload.model_dump().items():
        setattr(entry, key, value)
    db.flush()
    logger.info("Education updated: id=%d", entry.id)
    return entry


def delete_education(db: Session, entry: Education) -> None:
    db.delete(entry)
    db.flush()
    logger.info("Education deleted: id=%d", entry.id)
