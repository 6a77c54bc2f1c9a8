from datetime import datetime
from typing import Optional

import attrs

from src.service.matchday.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketEntity:
    """
    Per-game sale state of a seat.

    Seat fields and the customer display name are denormalised by the query side
    for listings; commands only ever touch status, customer_id and purchased_at.
    """

    game_id: int
    seat_id: int
    price: int
    status: TicketStatus = TicketStatus.AVAILABLE
    customer_id: Optional[int] = None
    purchased_at: Optional[datetime] = None
    section: Optional[str] = None
    row: Optional[str] = None
    number: Optional[int] = None
    seat_type: Optional[str] = None
    customer_name: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
