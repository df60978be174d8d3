"""Certification routes (JSON bodies)."""

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..common.identity import list_all, require
from ..common.validation import to_wire, validate_payload
from ..database.base import get_db
from .models import Certification
from .schemas import CertificationIn, CertificationOut
from .service import create_certification, delete_certification, update_certification

router = APIRouter(prefix="/certifications", tags=["certifications"])


@router.get("")
def list_certifications(db: Session = Depends(get_db)):
    return JSONResponse([to_wire(CertificationOut, c) for c in list_all(db, Certification)])


@router.post("")
def add_certification(body: dict = Body(...), db: Session = Depends(get_db)):
    payload = validate_payload(CertificationIn, body)
    cert = create_certification(db, payload)
    db.commit()
    return JSONResponse(to_wire(CertificationOut, cert), status_code=201)


@router.get("/{cert_id}")
def get_certification(cert_id: str, db: Session = Depends(get_db)):
    cert = require(db, Certification, cert_id, "Certification")
    return JSONResponse(to_wire(CertificationOut, cert))


@router.put("/{cert_id}")
def edit_certification(cert_id: str, body: dict = Body(...), db: Session = Depends(get_db)):
    cert = require(db, Certification, cert_id, "Certification")
    payload = validate_payload(CertificationIn, body)
    update_certification(db, cert, payload)
    db.commit()
    return JSONResponse(to_wire(CertificationOut, cert))


@router.delete("/{cert_id}")
def remove_certification(cert_id: str, db: Session = Depends(get_db)):
    cert = require(db, Certification, cert_id, "Certification")
    delete_certification(db, cert)
    db.commit()
    return JSONResponse({"message": "Certification deleted successfully"})
