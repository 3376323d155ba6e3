from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from healthtrack.database import get_db
from healthtrack.errors import InvalidInput
from healthtrack.routers.deps import get_indicator_catalog, get_language, get_user_id
from healthtrack.schemas.test_session import TestSessionCreate, TestSessionUpdate, TestSessionView
from healthtrack.services import test_sessions
from healthtrack.services.indicator_catalog import IndicatorCatalog

router = APIRouter(prefix="/api/test-sessions", tags=["test-sessions"])

_MAX_SESSION_ID = 2**63 - 1


def _session_id(raw: str) -> int:
    try:
        session_id = int(raw)
    except ValueError:
        raise InvalidInput("Invalid session id") from None
    if session_id <= 0 or session_id > _MAX_SESSION_ID:
        raise InvalidInput("Invalid session id")
    return session_id


def _dump(session: TestSessionView) -> dict:
    return session.model_dump(mode="json", by_alias=True, exclude_unset=True)


@router.get("")
def list_sessions(
    language: str = Depends(get_language),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    sessions = test_sessions.list_sessions(db, user_id, language)
    return {
        "statusCode": 200,
        "message": "Success",
        "data": {"sessions": [_dump(s) for s in sessions]},
    }


@router.post("", status_code=201)
def create_session(
    payload: TestSessionCreate,
    language: str = Depends(get_language),
    db: Session = Depends(get_db),
    catalog: IndicatorCatalog = Depends(get_indicator_catalog),
    user_id: str = Depends(get_user_id),
):
    session = test_sessions.create_session(db, catalog, user_id, payload, language)
    return {"statusCode": 201, "message": "Test session created", "data": {"session": _dump(session)}}


@router.get("/{session_id}")
def get_session(
    session_id: str,
    language: str = Depends(get_language),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    session = test_sessions.get_session(db, user_id, _session_id(session_id), language)
    return {"statusCode": 200, "message": "Success", "data": {"session": _dump(session)}}


@router.put("/{session_id}")
def update_session(
    session_id: str,
    payload: TestSessionUpdate,
    language: str = Depends(get_language),
    db: Session = Depends(get_db),
    catalog: IndicatorCatalog = Depends(get_indicator_catalog),
    user_id: str = Depends(get_user_id),
):
    session = test_sessions.update_session(db, catalog, user_id, _session_id(session_id), payload, language)
    return {"statusCode": 200, "message": "Test session updated", "data": {"session": _dump(session)}}


@router.delete("/{session_id}")
def delete_session(session_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_user_id)):
    test_sessions.delete_session(db, user_id, _session_id(session_id))
    return {"statusCode": 200, "message": "Test session deleted", "data": None}
