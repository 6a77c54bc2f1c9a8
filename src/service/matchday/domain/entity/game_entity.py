from datetime import datetime, timedelta, timezone
from typing import Optional

import attrs

from src.service.matchday.domain.enum.game_status import (
    FINISHED_GAME_STATUSES,
    PublicGameStatus,
)


# A game that kicked off longer ago than this is treated as played
GAME_FINISHED_AFTER = timedelta(hours=2)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@attrs.define
class GameEntity:
    venue_id: int
    opponent: str
    starts_at: datetime
    status: str = 'scheduled'
    description: Optional[str] = None
    venue_name: Optional[str] = None
    venue_slug: Optional[str] = None
    venue_location: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def public_status(self, now: Optional[datetime] = None) -> PublicGameStatus:
        """Derive the reader-facing status from the stored status and kick-off time."""
        if (self.status or '').strip().lower() in FINISHED_GAME_STATUSES:
            return PublicGameStatus.FINAL

        now = now or datetime.now(timezone.utc)
        if _as_utc(self.starts_at) < _as_utc(now) - GAME_FINISHED_AFTER:
            return PublicGameStatus.FINAL
        return PublicGameStatus.UPCOMING

    @property
    def starts_at_utc(self) -> datetime:
        return _as_utc(self.starts_at)
