from datetime import datetime
from typing import List, Optional

from src.service.matchday.domain.enum.game_status import PublicGameStatus
from src.service.matchday.driving_adapter.schema.base_schema import CamelModel


class SeatSummaryResponse(CamelModel):
    total_seats: int
    available_seats: int
    reserved_seats: int
    sold_seats: int


class SectionAvailabilityResponse(CamelModel):
    section: str
    total_seats: int
    available_seats: int
    reserved_seats: int
    sold_seats: int


class PublicGameResponse(CamelModel):
    id: int
    opponent: str
    venue: str
    date: str
    status: PublicGameStatus
    description: Optional[str] = None
    hero_image: Optional[str] = None
    highlights: List[str] = []
    recap: Optional[str] = None
    score: Optional[str] = None
    is_home: bool
    seat_summary: Optional[SeatSummaryResponse] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'opponent': 'Lakeside Rovers',
                'venue': 'Aurora Field (Stadli)',
                'date': '2026-11-07T18:30:00+00:00',
                'status': 'upcoming',
                'isHome': True,
                'seatSummary': {
                    'totalSeats': 10,
                    'availableSeats': 8,
                    'reservedSeats': 1,
                    'soldSeats': 1,
                },
            }
        }
    }


class PublicGameListResponse(CamelModel):
    games: List[PublicGameResponse]


class PublicGameDetailResponse(CamelModel):
    game: PublicGameResponse
    sections: List[SectionAvailabilityResponse]


class AdminGameResponse(CamelModel):
    id: int
    venue_id: int
    opponent: str
    starts_at: datetime
    status: str
    description: Optional[str] = None
    venue_name: Optional[str] = None
    venue_slug: Optional[str] = None
    venue_location: Optional[str] = None
    sections: List[SectionAvailabilityResponse] = []


class AdminGameListResponse(CamelModel):
    games: List[AdminGameResponse]


class SectionAvailabilityListResponse(CamelModel):
    sections: List[SectionAvailabilityResponse]
