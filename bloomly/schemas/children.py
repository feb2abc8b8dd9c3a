# bloomly/schemas/children.py
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ChildCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    yob: Optional[int] = Field(default=None, ge=1900, le=2100)


class ChildResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    yob: Optional[int] = None
