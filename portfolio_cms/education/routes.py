"""Education routes (JSON bodies)."""

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..common.identity import list_all, require
from ..common.validation import to_wire, validate_payload
from ..database.base import get_db
from .models import Education
from .schemas import EducationIn, EducationOut
from .service import create_education, delete_education, update_education

router = APIRouter(prefix="/education", tags=["education"])


@router.get("")
def list_education(db: Session = Depends(get_db)):
    return JSONResponse([to_wire(EducationOut, e) for e in list_all(db, Education)])


@router.post("")
def add_education(body: dict = Body(...), db: Session = Depends(get_db)):
    entry = create_education(db, validate_payload(EducationIn, body))
    db.commit()
    return JSONResponse(to_wire(EducationOut, entry), status_code=201)


@router.get("/{education_id}")
def get_education(education_id: str, db: Session = Depends(get_db)):
    return JSONResponse(to_wire(EducationOut, require(db, Education, education_id, "Education")))


@router.put("/{education_id}")
def edit_education(education_id: str, body: dict = Body(...), db: Session = Depends(get_db)):
    entry = require(db, Education, education_id, "Education")
    update_education(db, entry, validate_payload(EducationIn, body))
    db.commit()
    return JSONResponse(to_wire(EducationOut, entry))


@router.delete("/{education_id}")
def remove_education(education_id: str, db: Session = Depends(get_db)):
    entry = require(db, Education, education_id, "Education")
    delete_education(db, entry)
    db.commit()
    return JSONResponse({"message": "Education deleted successfully"})
