"""Contact service. At most one contact document exists."""

import logging

from sqlalchemy.orm import Session

from ..common.identity import first, next_id
from ..exceptions import PayloadInvalid, ResourceNotFound
from .models import Contact
from .schemas import ContactIn

logger = logging.getLogger(__name__)


def get_single_contact(db: Session) -> Contact:
    contact = first(db, Contact)
    if contact is None:
        raise ResourceNotFound("Contact")
    return contact


def create_contact(db: Session, payload: ContactIn) -> Contact:
    if first(db, Contact) is not None:
        raise PayloadInvalid("A contact already exists. Only one contact can be created.")
    contact = Contact(
        id=next_id(db, Contact),
        email=payload.email,
        phone=payload.phone,
        social_links=payload.social_links.model_dump(),
    )
    db.add(contact)
    db.flush()
    logger.info("Contact created: id=%d", contact.id)
    return contact


def update_contact(db: Session, contact: Contact, payload: ContactIn) -> Contact:
    contact.email = payload.email
    contact.phone = payload.phone
    contact.social_links = payload.social_links.model_dump()
    db.flush()
    logger.info("Contact updated: id=%d", contact.id)
    return contact


def delete_contact(db: Session, contact: Contact) -> None:
    db.delete(contact)
    db.flush()
    logger.info("Contact deleted: id=%d", contact.id)
