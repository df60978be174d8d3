"""Testimonial service."""

import logging

from sqlalchemy.orm import Session

from ..common.identity import next_id
from ..common.media import MediaSlot, PendingUpload, discard_media, push_upload, replace_media
from ..integrations.media import MediaHost
from .models import Testimonial
from .schemas import TestimonialIn

logger = logging.getLogger(__name__)

AUTHOR_IMAGE = MediaSlot("testimonial/feedback")


def create_testimonial(
    db: Session, media: MediaHost, payload: TestimonialIn, author_image: PendingUpload | None
) -> Testimonial:
    image_url = push_upload(media, author_image, AUTHOR_IMAGE)
    testimonial = Testimonial(id=next_id(db, Testimonial), author_image=image_url, **payload.model_dump())
    db.add(testimonial)
    db.flush()
    logger.info("Testimonial created: id=%d, author=%s", testimonial.id, testimonial.author_name)
    return testimonial


def update_testimonial(
    db: Session,
    media: MediaHost,
    testimonial: Testimonial,
    payload: TestimonialIn,
    author_image: PendingUpload | None,
) -> Testimonial:
    for key, value in payload.model_dump().items():
        setattr(testimonial, key, value)
    testimonial.author_image = replace_media(media, author_image, testimonial.author_image, AUTHOR_IMAGE)
    db.flush()
    logger.info("Testimonial updated: id=%d", testimonial.id)
    return testimonial


def delete_testimonial(db: Session, media: MediaHost, testimonial: Testimonial) -> None:
    discard_media(media, testimonial.author_image, AUTHOR_IMAGE)
    db.delete(testimonial)
    db.flush()
    logger.info("Testimonial deleted: id=%d", testimonial.id)
