# bloomly/routers/children.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bloomly.db import get_db
from bloomly.models.core import Child
from bloomly.schemas.auth import AuthClaims
from bloomly.schemas.children import ChildCreateRequest, ChildResponse
from bloomly.security import require_auth

router = APIRouter()


@router.post("", response_model=ChildResponse)
def create_child(
    payload: ChildCreateRequest,
    user: AuthClaims = Depends(require_auth),
    db: Session = Depends(get_db),
):
    child = Child(family_id=user.family_id, name=payload.name, yob=payload.yob)
    db.add(child)
    db.commit()
    db.refresh(child)
    return child


@router.get("", response_model=List[ChildResponse])
def list_children(
    user: AuthClaims = Depends(require_auth),
    db: Session = Depends(get_db),
):
    return (
        db.query(Child)
        .filter(Child.family_id == user.family_id)
        .order_by(Child.created_at, Child.id)
        .all()
    )
