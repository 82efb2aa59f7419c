"""
Saved test progress, one autosave snapshot per client.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

import sqlalchemy as sa
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from api.database import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TestProgress(Base):
    """
    Latest autosaved runner state for a client.
    The snapshot is stored verbatim as JSON; the server never interprets it.
    """

    __tablename__ = "test_progress"
    __test__ = False  # keep pytest from collecting this as a test class

    client_id: Mapped[str] = mapped_column(String(64), primary_key=True, index=True)
    data_json: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), default=_utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=_utc_now,
        onupdate=_utc_now,
        nullable=False,
        index=True,
    )

    @property
    def data(self) -> dict[str, Any] | None:
        """Parse snapshot from JSON."""
        try:
            value = json.loads(self.data_json)
        except (json.JSONDecodeError, TypeError):
            return None
        return value if isinstance(value, dict) else None

    @data.setter
    def data(self, value: dict[str, Any]) -> None:
        """Serialize snapshot to JSON."""
        self.data_json = json.dumps(value, ensure_ascii=False)
