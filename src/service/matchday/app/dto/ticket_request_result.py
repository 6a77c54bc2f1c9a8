from typing import List, Optional

import attrs

from src.service.matchday.domain.entity.section_availability_entity import (
    GameSeatSummary,
    SectionAvailabilityEntity,
)


@attrs.define(frozen=True)
class TicketRequestResult:
    success: bool
    seat_summary: GameSeatSummary
    sections: List[SectionAvailabilityEntity]
    reserved: int = 0
    requested: int = 0
    message: Optional[str] = None
    error: Optional[str] = None
