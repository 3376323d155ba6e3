from fastapi import Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from healthtrack.config import settings
from healthtrack.database import get_db
from healthtrack.services.indicator_catalog import IndicatorCatalog, SqlIndicatorCatalog


def get_user_id(x_user_id: str | None = Header(default=None)) -> str:
    # The upstream gateway authenticates the caller and forwards the verified id.
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id


def get_language(language: str | None = Query(default=None, max_length=10)) -> str:
    return language or settings.default_language


def get_indicator_catalog(db: Session = Depends(get_db)) -> IndicatorCatalog:
    return SqlIndicatorCatalog(db)
