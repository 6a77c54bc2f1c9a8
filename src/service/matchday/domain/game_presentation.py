"""
Public game representation

Maps a stored game onto what supporters see. ``decorate_public_game`` adds the
cosmetic fields (hero image, highlights, recap, scoreline); it picks entries from
fixed tables by game id so the same fixture always renders the same way.
"""

from datetime import datetime
from typing import Callable, Optional

import attrs

from src.service.matchday.domain.entity.game_entity import GameEntity
from src.service.matchday.domain.entity.section_availability_entity import GameSeatSummary
from src.service.matchday.domain.enum.game_status import PublicGameStatus


HOME_VENUE_SLUGS = frozenset({'aurora-field', 'stadli-arena'})
DEFAULT_VENUE_NAME = 'Aurora Field'

GAME_HERO_IMAGES = (
    'https://images.unsplash.com/photo-1521412644187-c49fa049e84d?auto=format&fit=crop&w=1400&q=80',
    'https://images.unsplash.com/photo-1502877338535-766e1452684a?auto=format&fit=crop&w=1400&q=80',
    'https://images.unsplash.com/photo-1517649763962-0c623066013b?auto=format&fit=crop&w=1400&q=80',
    'https://images.unsplash.com/photo-1471295253337-3ceaaedca402?auto=format&fit=crop&w=1400&q=80',
)

_HIGHLIGHTS: tuple[Callable[[str], list[str]], ...] = (
    lambda opponent: [
        f'High press drilled to unsettle {opponent} in their own half.',
        'Near-post set pieces rehearsed all week.',
        'Supporter display planned for kick-off.',
    ],
    lambda opponent: [
        f'Quick switches of play to stretch the {opponent} back line.',
        'Goalkeepers working on distribution under pressure.',
        'Extra standing capacity opened on the north terrace.',
    ],
    lambda opponent: [
        f'Midfield rotations tuned against the {opponent} press.',
        'Wingbacks cleared to push high in transition.',
        'New food stands open along the concourse.',
    ],
    lambda opponent: [
        f'Two academy players named on the bench against {opponent}.',
        'Light recovery session scheduled the day before.',
        'Limited matchday scarf on sale at the club shop.',
    ],
)

_RECAPS: tuple[Callable[[str], str], ...] = (
    lambda opponent: f'The Storm handled {opponent} with composure and took control after the break.',
    lambda opponent: f'A loud home crowd watched the Storm outwork {opponent} and see out late pressure.',
    lambda opponent: f'Sharp finishing and width from both flanks carried the Storm past {opponent}.',
    lambda opponent: f'The Storm answered every push from {opponent} and sealed it in stoppage time.',
)

_PREVIEWS: tuple[Callable[[str], str], ...] = (
    lambda opponent: f'A high-tempo meeting with {opponent}. Expect aggressive pressing and overlapping wingbacks.',
    lambda opponent: f'Training has centred on controlled build-up and fast counters against {opponent}.',
    lambda opponent: f'Set pieces and rest defence are the focus as the Storm look to unlock {opponent}.',
    lambda opponent: f'Fresh legs come into the side as the Storm hunt an early goal against {opponent}.',
)


@attrs.define
class PublicGameView:
    id: int
    opponent: str
    venue: str
    date: str
    status: PublicGameStatus
    description: Optional[str]
    is_home: bool
    hero_image: Optional[str] = None
    highlights: list[str] = attrs.field(factory=list)
    recap: Optional[str] = None
    score: Optional[str] = None
    seat_summary: Optional[GameSeatSummary] = None


def format_venue(game: GameEntity) -> str:
    name = game.venue_name or DEFAULT_VENUE_NAME
    return f'{name} ({game.venue_location})' if game.venue_location else name


def is_home_fixture(game: GameEntity) -> bool:
    if game.venue_slug and game.venue_slug in HOME_VENUE_SLUGS:
        return True
    return 'aurora' in (game.venue_name or '').lower()


def to_public_game(
    game: GameEntity,
    *,
    seat_summary: Optional[GameSeatSummary] = None,
    now: Optional[datetime] = None,
) -> PublicGameView:
    assert game.id is not None
    description = game.description.strip() if game.description else None
    return PublicGameView(
        id=game.id,
        opponent=game.opponent,
        venue=format_venue(game),
        date=game.starts_at_utc.isoformat(),
        status=game.public_status(now),
        description=description or None,
        is_home=is_home_fixture(game),
        seat_summary=seat_summary,
    )


def _pick(table: tuple, game_id: int):  # type: ignore[type-arg]
    return table[abs(game_id) % len(table)]


def decorate_public_game(view: PublicGameView) -> PublicGameView:
    view.hero_image = _pick(GAME_HERO_IMAGES, view.id)
    view.highlights = _pick(_HIGHLIGHTS, view.id)(view.opponent)
    if view.status is PublicGameStatus.FINAL:
        view.recap = _pick(_RECAPS, view.id)(view.opponent)
        home_goals = 2 + abs(view.id) % 3
        away_goals = abs(view.id + 1) % 2
        view.score = f'Storm {home_goals} - {away_goals} {view.opponent}'
        view.description = view.description or view.recap
    else:
        view.description = view.description or _pick(_PREVIEWS, view.id)(view.opponent)
    return view
