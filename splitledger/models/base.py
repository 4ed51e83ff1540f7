import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex


class FrozenModel(BaseModel):
    """Immutable record: created once, validated, then never mutated."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        from_attributes=True
    )
