"""
Public game status

Games carry a free-text status. Readers only ever see one of these two values,
derived from the stored status and the kick-off time.
"""

from enum import Enum


class PublicGameStatus(str, Enum):
    UPCOMING = 'upcoming'
    FINAL = 'final'


FINISHED_GAME_STATUSES = frozenset({'final', 'completed', 'finished'})
