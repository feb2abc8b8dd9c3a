# bloomly/routers/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bloomly.config import Settings, get_settings
from bloomly.db import get_db
from bloomly.models.core import Family
from bloomly.schemas.auth import CredentialsRequest, LoginRequest, TokenResponse
from bloomly.security import hash_password, sign_token, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=TokenResponse)
def register(
    payload: CredentialsRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    email = payload.email.lower()
    family = Family(email=email, password_hash=hash_password(payload.password))
    db.add(family)
    try:
        db.commit()
    except IntegrityError:
        # unique email is the only constraint a fresh family row can hit
        db.rollback()
        raise HTTPException(status_code=400, detail="email exists?")
    db.refresh(family)

    logger.info("family registered email=%s", email)
    return TokenResponse(token=sign_token(family.id, family.email, settings.JWT_SECRET))


@router.post("/login", response_model=TokenResponse)
def login(
    payload: Optional[LoginRequest] = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    payload = payload or LoginRequest()
    email = payload.email.lower()
    family = db.query(Family).filter(Family.email == email).first() if email else None

    # same answer for missing fields, unknown email and wrong password
    if (
        family is None
        or not payload.password
        or not verify_password(payload.password, family.password_hash)
    ):
        logger.info("login failed email=%s", email)
        raise HTTPException(status_code=401, detail="invalid credentials")

    return TokenResponse(token=sign_token(family.id, family.email, settings.JWT_SECRET))
