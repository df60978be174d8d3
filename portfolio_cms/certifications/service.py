"""Certification service: CRUD over the certifications collection."""

import datetime as dt
import logging

from sqlalchemy.orm import Session

from ..common.identity import next_id
from .models import Certification
from .schemas import CertificationIn

logger = logging.getLogger(__name__)


def _apply(cert: Certification, payload: CertificationIn) -> None:
    cert.name = payload.name
    cert.provider = payload.provider
    cert.date = dt.date.fromisoformat(payload.date)
    cert.certificate_url = payload.certificate_url
    cert.details = payload.details


def create_certification(db: Session, payload: CertificationIn) -> Certification:
    cert = Certification(id=next_id(db, Certification))
    _apply(cert, payload)
    db.add(cert)
    db.flush()
    logger.info("Certification created: id=%d, name=%s", cert.id, cert.name)
    return cert


def update_certification(db: Session, cert: Certification, payload: CertificationIn) -> Certification:
    _apply(cert, payload)
    db.flush()
    logger.info("Certification updated: id=%d", cert.id)
    return cert


def delete_certification(db: Session, cert: Certification) -> None:
    db.delete(cert)
    db.flush()
    logger.info("Certification deleted: id=%d", cert.id)
