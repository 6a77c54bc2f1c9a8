from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class SeatModel(Base):
    __tablename__ = 'seat'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    venue_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('venue.id', ondelete='CASCADE'), nullable=False, index=True
    )
    section: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    row: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    seat_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    __table_args__ = (
        UniqueConstraint('venue_id', 'section', 'row', 'number', name='uq_seat_position'),
    )
