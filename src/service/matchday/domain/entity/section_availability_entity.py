"""
Section availability

Counts are derived from every seat of the game's venue cross-referenced with the
ticket row for that game. A seat without a ticket row counts as available, so
``total_seats == available_seats + reserved_seats + sold_seats`` always holds.
"""

from typing import Iterable

import attrs


GENERAL_ADMISSION = 'General Admission'


@attrs.define
class SectionAvailabilityEntity:
    section: str
    total_seats: int = 0
    available_seats: int = 0
    reserved_seats: int = 0
    sold_seats: int = 0


@attrs.define
class GameSeatSummary:
    total_seats: int = 0
    available_seats: int = 0
    reserved_seats: int = 0
    sold_seats: int = 0

    @classmethod
    def from_sections(cls, sections: Iterable[SectionAvailabilityEntity]) -> 'GameSeatSummary':
        summary = cls()
        for section in sections:
            summary.total_seats += section.total_seats
            summary.available_seats += section.available_seats
            summary.reserved_seats += section.reserved_seats
            summary.sold_seats += section.sold_seats
        return summary

    @property
    def is_sold_out(self) -> bool:
        return self.available_seats <= 0
