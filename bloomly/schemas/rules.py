# bloomly/schemas/rules.py
from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# rules.daily_minutes is a 32-bit INT column
MAX_DAILY_MINUTES = 2_147_483_647


class RuleUpsertRequest(BaseModel):
    platform: str = Field(min_length=1)
    daily_minutes: int = Field(gt=0, le=MAX_DAILY_MINUTES)
    bedtime: str = Field(min_length=1)      # "21:00"
    # element shape is left to the enforcement clients
    whitelist: Optional[List[Any]] = None


class RuleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    platform: str
    daily_minutes: int
    bedtime: str
    whitelist: List[Any] = []
    updated_at: Optional[datetime] = None
