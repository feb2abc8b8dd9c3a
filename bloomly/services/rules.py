# bloomly/services/rules.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from bloomly.models.core import Rule

logger = logging.getLogger(__name__)

# Fallback handed to enforcement clients when the family has no rule for a platform.
DEFAULT_POLICY = {"daily_minutes": 45, "bedtime": "21:00", "whitelist": []}
DEFAULT_PLATFORM = "youtube"

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert_rule(
    db: Session,
    family_id: UUID,
    platform: str,
    daily_minutes: int,
    bedtime: str,
    whitelist: Optional[List[Any]] = None,
):
    """
    Create or overwrite the family's rule for a platform in a single statement.

    INSERT ... ON CONFLICT (family_id, platform) DO UPDATE, so two writers racing
    on the same pair end up with one row holding the last write.
    """
    dialect = db.get_bind().dialect.name
    try:
        insert = _UPSERT_INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"rule upsert is not supported on {dialect}")

    now = datetime.now(timezone.utc)
    stmt = insert(Rule).values(
        id=uuid.uuid4(),
        family_id=family_id,
        platform=platform,
        daily_minutes=daily_minutes,
        bedtime=bedtime,
        whitelist=list(whitelist or []),
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Rule.family_id, Rule.platform],
        set_={
            "daily_minutes": stmt.excluded.daily_minutes,
            "bedtime": stmt.excluded.bedtime,
            "whitelist": stmt.excluded.whitelist,
            "updated_at": now,
        },
    ).returning(
        Rule.id,
        Rule.platform,
        Rule.daily_minutes,
        Rule.bedtime,
        Rule.whitelist,
        Rule.updated_at,
    )

    row = db.execute(stmt).one()
    db.commit()
    logger.info(
        "rule upserted family=%s platform=%s daily_minutes=%s",
        family_id, platform, daily_minutes,
    )
    return row


def list_rules(db: Session, family_id: UUID) -> List[Rule]:
    return db.query(Rule).filter(Rule.family_id == family_id).all()


def get_policy(db: Session, family_id: UUID, platform: Optional[str] = None) -> dict:
    rule = (
        db.query(Rule)
        .filter(Rule.family_id == family_id, Rule.platform == (platform or DEFAULT_PLATFORM))
        .first()
    )
    if rule is None:
        return dict(DEFAULT_POLICY, whitelist=[])

    return {
        "daily_minutes": rule.daily_minutes,
        "bedtime": rule.bedtime,
        "whitelist": rule.whitelist if rule.whitelist is not None else [],
    }
