"""Work experience routes (multipart, optional company logo).

`responsibilities` and `technologies` arrive as repeated form fields.
"""

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
from .models import WorkExperience
from .schemas import WorkExperienceIn, WorkExperienceOut
from .service import COMPANY_LOGO, create_work_experience, delete_work_experience, update_work_experience

router = APIRouter(prefix="/work-experience", tags=["work-experience"])


@router.get("")
def list_work_experience(db: Session = Depends(get_db)):
    return JSONResponse([to_wire(WorkExperienceOut, w) for w in list_all(db, WorkExperience)])


@router.post("")
@limiter.limit(settings.rate_limit_upload)
def add_work_experience(
    request: Request,
    title: str = Form(""),
    company: str = Form(""),
    location: str = Form(""),
    period: str = Form(""),
    description: str = Form(""),
    responsibilities: list[str] = Form([]),
    technologies: list[str] = Form([]),
    company_logo: UploadFile | None = File(None, alias="companyLogo"),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    payload = validate_payload(
        WorkExperienceIn,
        {
            "title": title,
            "company": company,
            "location": location,
            "period": period,
            "description": description,
            "responsibilities": responsibilities,
            "technologies": technologies,
        },
    )
    experience = create_work_experience(db, media, payload, prepare_upload(company_logo, COMPANY_LOGO))
    db.commit()
    return JSONResponse(to_wire(WorkExperienceOut, experience), status_code=201)


@router.get("/{experience_id}")
def get_work_experience(experience_id: str, db: Session = Depends(get_db)):
    return JSONResponse(to_wire(WorkExperienceOut, require(db, WorkExperience, experience_id, "Work experience")))


@router.put("/{experience_id}")
@limiter.limit(settings.rate_limit_upload)
def edit_work_experience(
    request: Request,
    experience_id: str,
    title: str = Form(""),
    company: str = Form(""),
    location: str = Form(""),
    period: str = Form(""),
    description: str = Form(""),
    responsibilities: list[str] = Form([]),
    technologies: list[str] = Form([]),
    company_logo: UploadFile | None = File(None, alias="companyLogo"),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    experience = require(db, WorkExperience, experience_id, "Work experience")
    payload = validate_payload(
        WorkExperienceIn,
        {
            "title": title,
            "company": company,
            "location": location,
            "period": period,
            "description": description,
            "responsibilities": responsibilities,
            "technologies": technologies,
        },
    )
    update_work_experience(db, media, experience, payload, prepare_upload(company_logo, COMPANY_LOGO))
    db.commit()
    return JSONResponse(to_wire(WorkExperienceOut, experience))


@router.delete("/{experience_id}")
def remove_work_experience(
    experience_id: str,
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    experience = require(db, WorkExperience, experience_id, "Work experience")
    delete_work_experience(db, media, experience)
    db.commit()
    return JSONResponse({"message": "Work experience deleted successfully"})
