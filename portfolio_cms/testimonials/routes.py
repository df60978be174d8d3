"""Testimonial routes (multipart, optional author portrait)."""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..common.identity import list_all, require
from ..common.media import prepare_upload
from ..common.validation import to_wire, validate_payload
from ..config import settings
from ..database.base import get_db
from ..dependencies import get_media_host
from ..integrations.media import MediaHost
from ..rate_limit import limiter
from .models import Testimonial
from .schemas import TestimonialIn, TestimonialOut
from .service import AUTHOR_IMAGE, create_testimonial, delete_testimonial, update_testimonial

router = APIRouter(prefix="/testimonials", tags=["testimonials"])


@router.get("")
def list_testimonials(db: Session = Depends(get_db)):
    return JSONResponse([to_wire(TestimonialOut, t) for t in list_all(db, Testimonial)])


@router.post("")
@limiter.limit(settings.rate_limit_upload)
def add_testimonial(
    request: Request,
    quote: str = Form(""),
    author_name: str = Form("", alias="authorName"),
    author_position: str = Form("", alias="authorPosition"),
    author_image: UploadFile | None = File(None, alias="authorImage"),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    payload = validate_payload(
        TestimonialIn, {"quote": quote, "authorName": author_name, "authorPosition": author_position}
    )
    testimonial = create_testimonial(db, media, payload, prepare_upload(author_image, AUTHOR_IMAGE))
    db.commit()
    return JSONResponse(to_wire(TestimonialOut, testimonial), status_code=201)


@router.get("/{testimonial_id}")
def get_testimonial(testimonial_id: str, db: Session = Depends(get_db)):
    return JSONResponse(to_wire(TestimonialOut, require(db, Testimonial, testimonial_id, "Testimonial")))


@router.put("/{testimonial_id}")
@limiter.limit(settings.rate_limit_upload)
def edit_testimonial(
    request: Request,
    testimonial_id: str,
    quote: str = Form(""),
    author_name: str = Form("", alias="authorName"),
    author_position: str = Form("", alias="authorPosition"),
    author_image: UploadFile | None = File(None, alias="authorImage"),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    testimonial = require(db, Testimonial, testimonial_id, "Testimonial")
    payload = validate_payload(
        TestimonialIn, {"quote": quote, "authorName": author_name, "authorPosition": author_position}
    )
    update_testimonial(db, media, testimonial, payload, prepare_upload(author_image, AUTHOR_IMAGE))
    db.commit()
    return JSONResponse(to_wire(TestimonialOut, testimonial))


@router.delete("/{testimonial_id}")
def remove_testimonial(
    testimonial_id: str,
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    testimonial = require(db, Testimonial, testimonial_id, "Testimonial")
    delete_testimonial(db, media, testimonial)
    db.commit()
    return JSONResponse({"message": "Testimonial deleted successfully"})
