# bloomly/schemas/policy.py
from typing import Any, List

from pydantic import BaseModel


class PolicyResponse(BaseModel):
    daily_minutes: int
    bedtime: str
    whitelist: List[Any] = []
