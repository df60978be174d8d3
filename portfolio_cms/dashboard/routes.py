"""Dashboard routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..database.base import get_db
from .service import get_counts

router = APIRouter(tags=["dashboard"])


@router.get("/count")
def count_api(db: Session = Depends(get_db)):
    return JSONResponse(get_counts(db).model_dump(by_alias=True))
