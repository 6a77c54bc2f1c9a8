from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from src.service.matchday.domain.enum.ticket_status import TicketStatus
from src.service.matchday.driving_adapter.schema.base_schema import CamelModel
from src.service.matchday.driving_adapter.schema.game_schema import (
    SeatSummaryResponse,
    SectionAvailabilityResponse,
)


class TicketRequestBody(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    seats: int = 1

    @field_validator('seats', mode='before')
    @classmethod
    def coerce_seats(cls, v: Any) -> int:
        # Anything that is not a whole number falls back to a single seat
        if v is None or isinstance(v, bool):
            return 1
        try:
            return int(v) if isinstance(v, (int, float)) else int(str(v).strip())
        except (TypeError, ValueError, OverflowError):
            return 1

    model_config = {
        'json_schema_extra': {
            'example': {'name': 'Mia Keller', 'email': 'mia@example.com', 'seats': 2}
        }
    }


class TicketRequestResponse(CamelModel):
    success: bool
    reserved: Optional[int] = None
    requested: Optional[int] = None
    message: Optional[str] = None
    error: Optional[str] = None
    seat_summary: Optional[SeatSummaryResponse] = None
    sections: Optional[List[SectionAvailabilityResponse]] = None


class TicketResponse(CamelModel):
    id: int
    game_id: int
    seat_id: int
    price: int
    status: TicketStatus
    customer_id: Optional[int] = None
    customer_name: Optional[str] = None
    purchased_at: Optional[datetime] = None
    section: Optional[str] = None
    row: Optional[str] = None
    number: Optional[int] = None
    seat_type: Optional[str] = None


class TicketListResponse(CamelModel):
    tickets: List[TicketResponse]


class TicketStatusUpdateRequest(CamelModel):
    status: Optional[str] = None
    purchased_at: Optional[datetime] = None  # ISO string or epoch (s or ms)


class TicketAssignRequest(CamelModel):
    customer_id: Optional[int] = None


class MaterializeTicketsRequest(CamelModel):
    price: int = Field(ge=0, description='Ticket price in minor currency units')


class MaterializeTicketsResponse(CamelModel):
    success: bool
    created: int


class TicketSalesOverviewResponse(CamelModel):
    total_tickets: int
    sold_tickets: int
    reserved_tickets: int
    available_tickets: int
    revenue: int


class SuccessResponse(CamelModel):
    success: bool
