# bloomly/schemas/events.py
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class EventCreateRequest(BaseModel):
    platform: str = Field(min_length=1)
    kind: str = Field(min_length=1)         # 'start' | 'stop' | 'blocked' | 'intent' ...
    payload: Optional[Any] = None
    child_id: Optional[UUID] = None


class OkResponse(BaseModel):
    ok: bool = True
