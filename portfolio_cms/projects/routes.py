"""Project routes (multipart: thumbnail plus image and icon galleries)."""

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..common.identity import list_all, require
from ..common.media import prepare_upload, prepare_uploads
from ..common.validation import to_wire, validate_payload
from ..config import settings
from ..database.base import get_db
from ..dependencies import get_media_host
from ..integrations.media import MediaHost
from ..rate_limit import limiter
from .models import Project
from .schemas import ProjectIn, ProjectOut
from .service import ICONS, IMAGES, THUMBNAIL, create_project, delete_project, update_project

router = APIRouter(prefix="/projects", tags=["projects"])


def _form(title, description, domain, live_url, github_url, key_features) -> dict:
    return {
        "title": title,
        "description": description,
        "domain": domain,
        "liveUrl": live_url,
        "githubUrl": github_url,
        "keyFeatures": key_features,
    }


@router.get("")
def list_projects(db: Session = Depends(get_db)):
    return JSONResponse([to_wire(ProjectOut, p) for p in list_all(db, Project)])


@router.post("")
@limiter.limit(settings.rate_limit_upload)
def add_project(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    domain: str = Form(""),
    live_url: str = Form("", alias="liveUrl"),
    github_url: str = Form("", alias="githubUrl"),
    key_features: str = Form("", alias="keyFeatures"),
    thumbnail: UploadFile | None = File(None),
    images: list[UploadFile] | None = File(None),
    icon_lists: list[UploadFile] | None = File(None, alias="iconLists"),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    payload = validate_payload(ProjectIn, _form(title, description, domain, live_url, github_url, key_features))
    project = create_project(
        db,
        media,
        payload,
        prepare_upload(thumbnail, THUMBNAIL),
        prepare_uploads(images, IMAGES),
        prepare_uploads(icon_lists, ICONS),
    )
    db.commit()
    return JSONResponse(to_wire(ProjectOut, project), status_code=201)


@router.get("/{project_id}")
def get_project(project_id: str, db: Session = Depends(get_db)):
    return JSONResponse(to_wire(ProjectOut, require(db, Project, project_id, "Project")))


@router.put("/{project_id}")
@limiter.limit(settings.rate_limit_upload)
def edit_project(
    request: Request,
    project_id: str,
    title: str = Form(""),
    description: str = Form(""),
    domain: str = Form(""),
    live_url: str = Form("", alias="liveUrl"),
    github_url: str = Form("", alias="githubUrl"),
    key_features: str = Form("", alias="keyFeatures"),
    removed_images: list[str] = Form([], alias="removedImages"),
    removed_icon_lists: list[str] = Form([], alias="removedIconLists"),
    thumbnail: UploadFile | None = File(None),
    images: list[UploadFile] | None = File(None),
    icon_lists: list[UploadFile] | None = File(None, alias="iconLists"),
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    project = require(db, Project, project_id, "Project")
    payload = validate_payload(ProjectIn, _form(title, description, domain, live_url, github_url, key_features))
    update_project(
        db,
        media,
        project,
        payload,
        prepare_upload(thumbnail, THUMBNAIL),
        prepare_uploads(images, IMAGES),
        prepare_uploads(icon_lists, ICONS),
        removed_images,
        removed_icon_lists,
    )
    db.commit()
    return JSONResponse(to_wire(ProjectOut, project))


@router.delete("/{project_id}")
def remove_project(
    project_id: str,
    db: Session = Depends(get_db),
    media: MediaHost = Depends(get_media_host),
):
    project = require(db, Project, project_id, "Project")
    delete_project(db, media, project)
    db.commit()
    return JSONResponse({"message": "Project deleted successfully"})
