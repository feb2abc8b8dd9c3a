# bloomly/routers/policy.py
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bloomly.db import get_db
from bloomly.schemas.auth import AuthClaims
from bloomly.schemas.policy import PolicyResponse
from bloomly.security import require_auth
from bloomly.services.rules import get_policy

router = APIRouter()


@router.get("", response_model=PolicyResponse)
def current_policy(
    platform: Optional[str] = None,
    user: AuthClaims = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Read path for extensions/device agents: the stored rule or the built-in default."""
    return get_policy(db, user.family_id, platform)
