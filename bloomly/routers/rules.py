# bloomly/routers/rules.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bloomly.db import get_db
from bloomly.schemas.auth import AuthClaims
from bloomly.schemas.rules import RuleResponse, RuleUpsertRequest
from bloomly.security import require_auth
from bloomly.services.rules import list_rules, upsert_rule

router = APIRouter()


@router.get("", response_model=List[RuleResponse])
def get_rules(
    user: AuthClaims = Depends(require_auth),
    db: Session = Depends(get_db),
):
    return list_rules(db, user.family_id)


@router.post("", response_model=RuleResponse)
def put_rule(
    payload: RuleUpsertRequest,
    user: AuthClaims = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Per-platform rule; posting the same platform again overwrites it."""
    return upsert_rule(
        db,
        family_id=user.family_id,
        platform=payload.platform,
        daily_minutes=payload.daily_minutes,
        bedtime=payload.bedtime,
        whitelist=payload.whitelist,
    )
