# bloomly/models/core.py
from sqlalchemy import (
    Column, Text, DateTime, ForeignKey,
    Integer, BigInteger, JSON, Uuid, UniqueConstraint, func
)
from sqlalchemy.dialects.postgresql import JSONB
from bloomly.db import Base
import uuid
from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc)


# JSONB on Postgres, plain JSON elsewhere (sqlite in tests)
JsonDoc = JSON().with_variant(JSONB(), "postgresql")
# BIGSERIAL on Postgres; sqlite only autoincrements INTEGER primary keys
EventId = BigInteger().with_variant(Integer(), "sqlite")


class Family(Base):
    __tablename__ = "families"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())


class Child(Base):
    __tablename__ = "children"
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    family_id = Column(Uuid, ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    name = Column(Text, nullable=False)
    yob = Column(Integer)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())


class Rule(Base):
    __tablename__ = "rules"
    __table_args__ = (
        # one rule per platform per family; the upsert conflicts on this
        UniqueConstraint("family_id", "platform", name="uq_rules_family_platform"),
    )
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    family_id = Column(Uuid, ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    platform = Column(Text, nullable=False)        # 'youtube' | 'roblox' ...
    daily_minutes = Column(Integer, nullable=False)
    bedtime = Column(Text, nullable=False)         # '21:00'
    whitelist = Column(JsonDoc, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())


class UsageEvent(Base):
    __tablename__ = "usage_events"
    id = Column(EventId, primary_key=True, autoincrement=True)
    family_id = Column(Uuid, ForeignKey("families.id", ondelete="CASCADE"), nullable=False)
    child_id = Column(Uuid, ForeignKey("children.id", ondelete="SET NULL"))
    platform = Column(Text, nullable=False)
    kind = Column(Text, nullable=False)            # 'start' | 'stop' | 'blocked' | 'intent' ...
    payload = Column(JsonDoc, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
