"""Technology routes (multipart, optional icon upload)."""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..common.identity import require
from ..common.media import prepare_upload
from ..common.validation import to_wire, validate_payload
from ..config import settings
from ..database.base import get_db
from ..dependencies import get_cache, get_media_host
from ..integrations.cache import CacheService
from ..integrations.media import MediaHost
from ..rate_limit import limiter
from .models import Technology
from .schemas import TechnologyIn, TechnologyOut
from .service import (
    ICON,
    create_technology,
    delete_technology,
    invalidate_technology_list,
    list_technologies,
    update_technology,
)

router = APIRouter(prefix="/technologies", tags=["technologies"])


@router.get("")
def list_technologies_route(db: Session = Depends(get_db), cache: CacheService = Depends(get_cache)):
    return JSONResponse(list_technologies(db, cache))


@router.post("")
@limiter.limit(settings.rate_limit_upload)
def add_technology(
    request: Request,
    name: str = Form(""),
    category: str = Form(""),
    icon: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
    cache: CacheService = Depends(get_cache),
):
    payload = validate_payload(TechnologyIn, {"name": name, "category": category})
    tech = create_technology(db, media, payload, prepare_upload(icon, ICON))
    db.commit()
    invalidate_technology_list(cache)
    return JSONResponse(to_wire(TechnologyOut, tech), status_code=201)


@router.get("/{tech_id}")
def get_technology(tech_id: str, db: Session = Depends(get_db)):
    return JSONResponse(to_wire(TechnologyOut, require(db, Technology, tech_id, "Technology")))


@router.put("/{tech_id}")
@limiter.limit(settings.rate_limit_upload)
def edit_technology(
    request: Request,
    tech_id: str,
    name: str = Form(""),
    category: str = Form(""),
    icon: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
    cache: CacheService = Depends(get_cache),
):
    tech = require(db, Technology, tech_id, "Technology")
    payload = validate_payload(TechnologyIn, {"name": name, "category": category})
    update_technology(db, media, tech, payload, prepare_upload(icon, ICON))
    db.commit()
    invalidate_technology_list(cache)
    return JSONResponse(to_wire(TechnologyOut, tech))


@router.delete("/{tech_id}")
def remove_technology(
    tech_id: str,
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
    cache: CacheService = Depends(get_cache),
):
    tech = require(db, Technology, tech_id, "Technology")
    delete_technology(db, media, tech)
    db.commit()
    invalidate_technology_list(cache)
    return JSONResponse({"message": "Technology deleted successfully"})
