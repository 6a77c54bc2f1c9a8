from datetime import datetime, timedelta, timezone

import pytest

from src.service.matchday.domain.entity.customer_entity import (
    CustomerEntity,
    format_display_name,
    normalize_email,
)
from src.service.matchday.domain.entity.game_entity import GameEntity
from src.service.matchday.domain.entity.section_availability_entity import (
    GameSeatSummary,
    SectionAvailabilityEntity,
)
from src.service.matchday.domain.enum.game_status import PublicGameStatus
from src.service.matchday.domain.game_presentation import (
    decorate_public_game,
    format_venue,
    is_home_fixture,
    to_public_game,
)
from src.service.matchday.domain.value_object.supporter_name import SupporterName


pytestmark = pytest.mark.unit

NOW = datetime(2026, 10, 19, 18, 0, tzinfo=timezone.utc)


def _game(**overrides) -> GameEntity:
    values = {
        'id': 7,
        'venue_id': 1,
        'opponent': 'Harbor City FC',
        'starts_at': NOW + timedelta(days=3),
        'status': 'scheduled',
        'venue_name': 'Aurora Field',
        'venue_slug': 'aurora-field',
        'venue_location': 'Harbourside',
    }
    values.update(overrides)
    return GameEntity(**values)


class TestSupporterName:
    @pytest.mark.parametrize(
        'full_name,first,last',
        [
            ('Mia Keller', 'Mia', 'Keller'),
            ('  Mia   van der Berg ', 'Mia', 'van der Berg'),
            ('Cher', 'Cher', None),
            ('', None, None),
            ('   ', None, None),
            (None, None, None),
        ],
    )
    def test_parse(self, full_name, first, last):
        name = SupporterName.parse(full_name)

        assert name.first_name == first
        assert name.last_name == last


class TestCustomer:
    def test_normalize_email_trims_and_lowercases(self):
        assert normalize_email('  Mia@Example.COM ') == 'mia@example.com'
        assert normalize_email(None) == ''

    def test_display_name_skips_missing_parts(self):
        assert format_display_name('Mia', 'Keller') == 'Mia Keller'
        assert format_display_name('Mia', None) == 'Mia'
        assert format_display_name(None, None) is None

    def test_merge_contact_keeps_stored_values_when_input_missing(self):
        customer = CustomerEntity(email='mia@example.com', first_name='Mia', phone='555-0100')

        changes = customer.merge_contact(first_name='Mia', last_name='Keller', phone=None)

        assert changes == {'last_name': 'Keller'}


class TestGameSeatSummary:
    def test_sums_sections_and_keeps_conservation(self):
        sections = [
            SectionAvailabilityEntity('East Stand', 4, 1, 2, 1),
            SectionAvailabilityEntity('North Terrace', 3, 3, 0, 0),
        ]

        summary = GameSeatSummary.from_sections(sections)

        assert summary == GameSeatSummary(
            total_seats=7, available_seats=4, reserved_seats=2, sold_seats=1
        )
        assert summary.total_seats == (
            summary.available_seats + summary.reserved_seats + summary.sold_seats
        )
        assert summary.is_sold_out is False

    def test_no_sections_is_sold_out(self):
        assert GameSeatSummary.from_sections([]).is_sold_out is True


class TestPublicStatus:
    @pytest.mark.parametrize('status', ['final', 'Completed', ' FINISHED '])
    def test_finished_status_is_final(self, status):
        game = _game(status=status, starts_at=NOW + timedelta(days=30))

        assert game.public_status(NOW) is PublicGameStatus.FINAL

    def test_kickoff_more_than_two_hours_ago_is_final(self):
        game = _game(starts_at=NOW - timedelta(hours=2, minutes=1))

        assert game.public_status(NOW) is PublicGameStatus.FINAL

    def test_game_in_progress_is_still_upcoming(self):
        game = _game(starts_at=NOW - timedelta(hours=1))

        assert game.public_status(NOW) is PublicGameStatus.UPCOMING

    def test_naive_kickoff_is_read_as_utc(self):
        game = _game(starts_at=(NOW - timedelta(hours=3)).replace(tzinfo=None))

        assert game.public_status(NOW) is PublicGameStatus.FINAL


class TestGamePresentation:
    def test_venue_label_includes_location(self):
        assert format_venue(_game()) == 'Aurora Field (Harbourside)'
        assert format_venue(_game(venue_name=None, venue_location=None)) == 'Aurora Field'

    def test_home_fixture_by_slug_or_name(self):
        assert is_home_fixture(_game()) is True
        assert is_home_fixture(_game(venue_slug='aurora-annex', venue_name='Aurora Annex'))
        assert not is_home_fixture(_game(venue_slug='riverside-park', venue_name='Riverside Park'))

    def test_upcoming_game_gets_preview_without_score(self):
        view = decorate_public_game(to_public_game(_game(), now=NOW))

        assert view.status is PublicGameStatus.UPCOMING
        assert view.score is None
        assert view.recap is None
        assert 'Harbor City FC' in view.description
        assert view.hero_image is not None
        assert len(view.highlights) == 3

    def test_final_game_gets_recap_and_score(self):
        view = decorate_public_game(to_public_game(_game(status='final'), now=NOW))

        # id 7: 2 + 7 % 3 home goals, (7 + 1) % 2 away goals
        assert view.score == 'Storm 3 - 0 Harbor City FC'
        assert view.recap is not None
        assert view.description == view.recap

    def test_decoration_is_stable_per_game(self):
        first = decorate_public_game(to_public_game(_game(), now=NOW))
        second = decorate_public_game(to_public_game(_game(), now=NOW))

        assert first == second

    def test_stored_description_is_kept(self):
        view = decorate_public_game(
            to_public_game(_game(description='  Derby day.  '), now=NOW)
        )

        assert view.description == 'Derby day.'
