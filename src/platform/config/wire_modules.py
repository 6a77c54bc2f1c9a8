"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.matchday.app.command import (
    assign_ticket_customer_use_case,
    materialize_game_tickets_use_case,
    request_tickets_use_case,
    reserve_tickets_use_case,
    update_ticket_status_use_case,
    upsert_customer_use_case,
)
from src.service.matchday.app.query import (
    get_game_use_case,
    get_section_availability_use_case,
    get_ticket_sales_overview_use_case,
    list_game_tickets_use_case,
    list_games_use_case,
)
from src.service.matchday.driving_adapter.http_controller.auth import require_admin


WIRE_MODULES: list[ModuleType] = [
    upsert_customer_use_case,
    reserve_tickets_use_case,
    request_tickets_use_case,
    update_ticket_status_use_case,
    assign_ticket_customer_use_case,
    materialize_game_tickets_use_case,
    get_game_use_case,
    list_games_use_case,
    get_section_availability_use_case,
    list_game_tickets_use_case,
    get_ticket_sales_overview_use_case,
    require_admin,
]
