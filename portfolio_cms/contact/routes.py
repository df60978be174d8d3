"""Contact routes (JSON bodies).

Besides the by-id routes, the collection path itself addresses the one
contact document: GET, PUT and DELETE /contact.
"""

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..common.identity import require
from ..common.validation import to_wire, validate_payload
from ..database.base import get_db
from .models import Contact
from .schemas import ContactIn, ContactOut
from .service import create_contact, delete_contact, get_single_contact, update_contact

router = APIRouter(prefix="/contact", tags=["contact"])


def _updated(db: Session, contact: Contact, body: dict) -> JSONResponse:
    update_contact(db, contact, validate_payload(ContactIn, body))
    db.commit()
    return JSONResponse(to_wire(ContactOut, contact))


def _deleted(db: Session, contact: Contact) -> JSONResponse:
    delete_contact(db, contact)
    db.commit()
    return JSONResponse({"message": "Contact deleted successfully"})


@router.get("")
def read_contact(db: Session = Depends(get_db)):
    return JSONResponse(to_wire(ContactOut, get_single_contact(db)))


@router.post("")
def add_contact(body: dict = Body(...), db: Session = Depends(get_db)):
    contact = create_contact(db, validate_payload(ContactIn, body))
    db.commit()
    return JSONResponse(to_wire(ContactOut, contact), status_code=201)


@router.put("")
def edit_single_contact(body: dict = Body(...), db: Session = Depends(get_db)):
    return _updated(db, get_single_contact(db), body)


@router.delete("")
def remove_single_contact(db: Session = Depends(get_db)):
    return _deleted(db, get_single_contact(db))


@router.get("/{contact_id}")
def get_contact(contact_id: str, db: Session = Depends(get_db)):
    return JSONResponse(to_wire(ContactOut, require(db, Contact, contact_id, "Contact")))


@router.put("/{contact_id}")
def edit_contact(contact_id: str, body: dict = Body(...), db: Session = Depends(get_db)):
    return _updated(db, require(db, Contact, contact_id, "Contact"), body)


@router.delete("/{contact_id}")
def remove_contact(contact_id: str, db: Session = Depends(get_db)):
    return _deleted(db, require(db, Contact, contact_id, "Contact"))
