from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('game.id', ondelete='CASCADE'), nullable=False
    )
    seat_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('seat.id', ondelete='CASCADE'), nullable=False
    )
    customer_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey('customer.id', ondelete='SET NULL'), nullable=True, index=True
    )
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # minor currency units
    status: Mapped[str] = mapped_column(String(20), default='available', nullable=False)
    purchased_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint('game_id', 'seat_id', name='uq_ticket_game_seat'),
        Index('ix_ticket_game_status', 'game_id', 'status'),
    )
