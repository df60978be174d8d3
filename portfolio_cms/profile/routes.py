"""Profile routes (multipart: portrait image and CV)."""

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
from .models import Profile
from .schemas import ProfileIn, ProfileOut
from .service import CV, IMAGE, create_profile, delete_profile, update_profile

router = APIRouter(prefix="/portfolio", tags=["profile"])


def _form(full_name, title, tagline, introduction, key_skills, status, years_of_experience) -> dict:
    return {
        "fullName": full_name,
        "title": title,
        "tagline": tagline,
        "introduction": introduction,
        "keySkills": key_skills,
        "status": status,
        "yearsOfExperience": years_of_experience,
    }


@router.get("")
def list_profiles(db: Session = Depends(get_db)):
    return JSONResponse([to_wire(ProfileOut, p) for p in list_all(db, Profile)])


@router.post("")
@limiter.limit(settings.rate_limit_upload)
def add_profile(
    request: Request,
    full_name: str = Form("", alias="fullName"),
    title: str = Form(""),
    tagline: str = Form(""),
    introduction: str = Form(""),
    key_skills: str = Form("", alias="keySkills"),
    status: str = Form(""),
    years_of_experience: str = Form("", alias="yearsOfExperience"),
    image: UploadFile | None = File(None),
    cv: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    payload = validate_payload(
        ProfileIn, _form(full_name, title, tagline, introduction, key_skills, status, years_of_experience)
    )
    profile = create_profile(db, media, payload, prepare_upload(image, IMAGE), prepare_upload(cv, CV))
    db.commit()
    return JSONResponse(to_wire(ProfileOut, profile), status_code=201)


@router.get("/{profile_id}")
def get_profile(profile_id: str, db: Session = Depends(get_db)):
    return JSONResponse(to_wire(ProfileOut, require(db, Profile, profile_id, "Profile")))


@router.put("/{profile_id}")
@limiter.limit(settings.rate_limit_upload)
def edit_profile(
    request: Request,
    profile_id: str,
    full_name: str = Form("", alias="fullName"),
    title: str = Form(""),
    tagline: str = Form(""),
    introduction: str = Form(""),
    key_skills: str = Form("", alias="keySkills"),
    status: str = Form(""),
    years_of_experience: str = Form("", alias="yearsOfExperience"),
    image: UploadFile | None = File(None),
    cv: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    profile = require(db, Profile, profile_id, "Profile")
    payload = validate_payload(
        ProfileIn, _form(full_name, title, tagline, introduction, key_skills, status, years_of_experience)
    )
    update_profile(db, media, profile, payload, prepare_upload(image, IMAGE), prepare_upload(cv, CV))
    db.commit()
    return JSONResponse(to_wire(ProfileOut, profile))


@router.delete("/{profile_id}")
def remove_profile(
    profile_id: str,
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    profile = require(db, Profile, profile_id, "Profile")
    delete_profile(db, media, profile)
    db.commit()
    return JSONResponse({"message": "Profile deleted successfully"})
