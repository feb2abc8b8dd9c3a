# bloomly/routers/events.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bloomly.db import get_db
from bloomly.models.core import Child, UsageEvent
from bloomly.schemas.auth import AuthClaims
from bloomly.schemas.events import EventCreateRequest, OkResponse
from bloomly.security import require_auth

router = APIRouter()


@router.post("", response_model=OkResponse)
def record_event(
    payload: EventCreateRequest,
    user: AuthClaims = Depends(require_auth),
    db: Session = Depends(get_db),
) -> OkResponse:
    if payload.child_id is not None:
        owned = (
            db.query(Child.id)
            .filter(Child.id == payload.child_id, Child.family_id == user.family_id)
            .first()
        )
        if owned is None:
            raise HTTPException(status_code=400, detail="unknown child")

    db.add(UsageEvent(
        family_id=user.family_id,
        child_id=payload.child_id,
        platform=payload.platform,
        kind=payload.kind,
        payload=payload.payload if payload.payload is not None else {},
    ))
    db.commit()
    return OkResponse(ok=True)
