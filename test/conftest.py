"""
Test Configuration and Fixtures

This module provides:
- An isolated SQLite database per test session (aiosqlite, file in a temp dir)
- Table reset before every integration test
- A session-scoped TestClient around an app wired to the DI container
- Seeding fixtures for venues, seats, games and tickets

Architecture:
- Unit tests (marked ``unit``): mocked collaborators, no database
- Integration tests: real SQLite database through the same repositories the API uses
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_dir = Path(tempfile.mkdtemp(prefix='matchday_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_dir / "matchday_test.db"}'

    test_log_dir = test_dir / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['SESSION_SECRET'] = 'test-session-secret'
    os.environ['SESSION_COOKIE_NAME'] = 'matchday_admin_session'
    os.environ['SESSION_COOKIE_SECURE'] = 'false'
    os.environ['ADMIN_USERNAME'] = 'admin@matchday.test'
    os.environ['ADMIN_PASSWORD'] = 'test-admin-password'
    os.environ['ADMIN_NAME'] = 'Test Admin'
    os.environ['ADMIN_ROLE'] = 'Box Office'
    os.environ['RESERVATION_MAX_SEATS_PER_REQUEST'] = '6'
    os.environ['RESERVATION_RETRY_BUDGET'] = '3'
    os.environ.pop('ADMIN_PASSWORD_HASH', None)
    os.environ.pop('OTEL_EXPORTER_OTLP_ENDPOINT', None)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, AsyncIterator, Awaitable, Callable, Generator  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any, Optional  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.constant.route_constant import AUTH_BASE  # noqa: E402
from src.service.matchday.domain.enum.ticket_status import TicketStatus  # noqa: E402
from src.service.matchday.driven_adapter.model import (  # noqa: E402
    GameModel,
    SeatModel,
    TicketModel,
    VenueModel,
)


ADMIN_USERNAME = os.environ['ADMIN_USERNAME']
ADMIN_PASSWORD = os.environ['ADMIN_PASSWORD']

SeedGame = Callable[..., Awaitable[dict[str, Any]]]


# =============================================================================
# Pytest Hooks: integration tests always start from empty tables
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    database = container.database()
    await database.drop_tables()
    await database.create_tables()
    yield
    # The engine belongs to this test's event loop; the TestClient loop builds its own
    await database.dispose()


@pytest.fixture
def seed_game(clean_database: None) -> SeedGame:
    """
    Factory that stores a venue, its seats, one game and the game's tickets.

    ``sections`` maps a section name (None for an unnamed section) to one ticket
    status per seat; a None status leaves that seat without a ticket row.
    Each call creates its own venue, so pass a distinct ``venue_slug`` when
    seeding more than one game in a test.
    """

    async def _seed(
        *,
        sections: dict[Optional[str], list[Optional[TicketStatus]]],
        opponent: str = 'Harbor City FC',
        starts_at: Optional[datetime] = None,
        status: str = 'scheduled',
        venue_slug: str = 'aurora-field',
        venue_name: str = 'Aurora Field',
        price: int = 4500,
    ) -> dict[str, Any]:
        async with container.database().session() as session:
            venue = VenueModel(name=venue_name, slug=venue_slug, location='Harbourside')
            session.add(venue)
            await session.flush()

            game = GameModel(
                venue_id=venue.id,
                opponent=opponent,
                starts_at=starts_at or datetime.now(timezone.utc) + timedelta(days=7),
                status=status,
            )
            session.add(game)
            await session.flush()

            seat_ids: list[int] = []
            ticket_ids: list[int] = []
            for section_name, statuses in sections.items():
                for number, ticket_status in enumerate(statuses, start=1):
                    seat = SeatModel(venue_id=venue.id, section=section_name, row='A', number=number)
                    session.add(seat)
                    await session.flush()
                    seat_ids.append(seat.id)
                    if ticket_status is None:
                        continue

                    ticket = TicketModel(
                        game_id=game.id,
                        seat_id=seat.id,
                        price=price,
                        status=ticket_status.value,
                        purchased_at=(
                            datetime.now(timezone.utc)
                            if ticket_status is TicketStatus.SOLD
                            else None
                        ),
                    )
                    session.add(ticket)
                    await session.flush()
                    ticket_ids.append(ticket.id)

            await session.commit()
            return {
                'game_id': game.id,
                'venue_id': venue.id,
                'seat_ids': seat_ids,
                'ticket_ids': ticket_ids,
            }

    return _seed


@pytest.fixture
async def open_game(seed_game: SeedGame) -> dict[str, Any]:
    """Five available tickets split over two named sections."""
    return await seed_game(
        sections={
            'North Terrace': [TicketStatus.AVAILABLE] * 3,
            'East Stand': [TicketStatus.AVAILABLE] * 2,
        }
    )


@pytest.fixture
async def sold_out_game(seed_game: SeedGame) -> dict[str, Any]:
    return await seed_game(
        sections={'North Terrace': [TicketStatus.SOLD, TicketStatus.RESERVED]},
        opponent='Riverside United',
    )


# =============================================================================
# HTTP Client Fixtures
# =============================================================================
@asynccontextmanager
async def _test_lifespan(app: FastAPI) -> AsyncIterator[None]:
    container.wire(modules=WIRE_MODULES)
    yield
    await container.database().dispose()
    container.unwire()


@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    app = create_app(lifespan=_test_lifespan, title_suffix=' (Test)', instrument=False)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    if 'client' not in request.fixturenames:
        yield
        return
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    """The shared client holding a fresh admin session cookie."""
    response = client.post(
        f'{AUTH_BASE}/login', json={'username': ADMIN_USERNAME, 'password': ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return client
