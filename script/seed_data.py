#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Reset Tables - drop and recreate every table (SQLite / local PostgreSQL)
2. Create Venues - home ground with a seat map, one away ground without seats
3. Create Games - a finished fixture, upcoming home fixtures, an away fixture
4. Create Tickets - one available ticket per seat for each home fixture

Notes:
- Uses DATABASE_URL (or POSTGRES_*) from settings, same as the API
- Production schemas are managed by Alembic; this script is for local runs only
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import os

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Database
from src.service.matchday.domain.enum.ticket_status import TicketStatus
from src.service.matchday.driven_adapter.model import (
    GameModel,
    SeatModel,
    TicketModel,
    VenueModel,
)


@dataclass
class SectionConfig:
    """Seat map block seeded for the home venue"""

    name: str
    rows: int
    seats_per_row: int
    seat_type: str
    price: int  # minor currency units


SECTIONS = [
    SectionConfig(name='North Terrace', rows=4, seats_per_row=10, seat_type='standing', price=2500),
    SectionConfig(name='East Stand', rows=3, seats_per_row=8, seat_type='standard', price=4500),
    SectionConfig(name='Club Level', rows=2, seats_per_row=5, seat_type='premium', price=9500),
]

OPPONENTS = ['Harbor City FC', 'Riverside United', 'Northgate Rovers', 'Summit Athletic']


def _row_label(index: int) -> str:
    return chr(ord('A') + index)


async def _reset_tables(database: Database) -> None:
    print('🗑️  Dropping tables...')
    await database.drop_tables()
    await database.create_tables()
    print('   ✅ Tables recreated')


async def _seed(database: Database) -> None:
    now = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)

    async with database.session() as session:
        home = VenueModel(
            name='Aurora Field',
            slug='aurora-field',
            location='Harbourside',
            capacity=sum(s.rows * s.seats_per_row for s in SECTIONS),
            description='Home of the Storm.',
        )
        away = VenueModel(name='Riverside Park', slug='riverside-park', location='Riverside')
        session.add_all([home, away])
        await session.flush()

        seats_by_price: list[tuple[SeatModel, int]] = []
        for section in SECTIONS:
            for row_index in range(section.rows):
                for number in range(1, section.seats_per_row + 1):
                    seat = SeatModel(
                        venue_id=home.id,
                        section=section.name,
                        row=_row_label(row_index),
                        number=number,
                        seat_type=section.seat_type,
                    )
                    seats_by_price.append((seat, section.price))
        session.add_all(seat for seat, _ in seats_by_price)

        games = [
            GameModel(
                venue_id=home.id,
                opponent=OPPONENTS[0],
                starts_at=now - timedelta(days=7),
                status='final',
            ),
            GameModel(
                venue_id=home.id,
                opponent=OPPONENTS[1],
                starts_at=now + timedelta(days=5),
                status='scheduled',
            ),
            GameModel(
                venue_id=home.id,
                opponent=OPPONENTS[2],
                starts_at=now + timedelta(days=19),
                status='scheduled',
            ),
            GameModel(
                venue_id=away.id,
                opponent=OPPONENTS[3],
                starts_at=now + timedelta(days=12),
                status='scheduled',
            ),
        ]
        session.add_all(games)
        await session.flush()

        home_games = [game for game in games if game.venue_id == home.id]
        session.add_all(
            TicketModel(
                game_id=game.id,
                seat_id=seat.id,
                price=price,
                status=TicketStatus.AVAILABLE.value,
            )
            for game in home_games
            for seat, price in seats_by_price
        )
        await session.commit()

    print(f'   ✅ Venues: 2, seats: {len(seats_by_price)}, games: {len(games)}')
    print(f'   ✅ Tickets: {len(seats_by_price) * len(home_games)}')


async def main() -> None:
    print('🌱 Seeding matchday database')
    print(f'   Database: {settings.DATABASE_URL_ASYNC.split("@")[-1]}')

    database = Database(db_url=settings.DATABASE_URL_ASYNC)
    try:
        if os.getenv('SEED_SKIP_RESET') != '1':
            await _reset_tables(database)
        await _seed(database)
    finally:
        await database.dispose()

    print('🎉 Seed complete')


if __name__ == '__main__':
    asyncio.run(main())
