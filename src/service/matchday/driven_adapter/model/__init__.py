"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.matchday.driven_adapter.model.customer_model import CustomerModel
from src.service.matchday.driven_adapter.model.game_model import GameModel
from src.service.matchday.driven_adapter.model.seat_model import SeatModel
from src.service.matchday.driven_adapter.model.ticket_model import TicketModel
from src.service.matchday.driven_adapter.model.venue_model import VenueModel

__all__ = [
    'CustomerModel',
    'GameModel',
    'SeatModel',
    'TicketModel',
    'VenueModel',
]
