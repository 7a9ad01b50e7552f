"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ledgerchess.core.models import ZERO_ADDRESS
from ledgerchess.core.shared_types import NO_COLOR, Status

# Keys of the single-value slots in the ledger_slots table
TOTAL_GAMES_KEY = "total_games"
PENDING_GAME_KEY = "pending_game"
# Largest game number an SQL BIGINT key can hold. Larger numbers are never handed out.
MAX_STORED_GAME_ID = (1 << 63) - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBLedgerSlot(Base):
    """Counters of the ledger: one row per key."""

    __tablename__ = "ledger_slots"
    key: Mapped[str] = mapped_column(String(32), primary_key=True)
    value: Mapped[int] = mapped_column(default=0)


class DBGame(Base):
    __tablename__ = "games"
    # game numbers are handed out by the registry, never by the database
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    player_one: Mapped[str] = mapped_column(String(64), default=ZERO_ADDRESS)
    player_two: Mapped[str] = mapped_column(String(64), default=ZERO_ADDRESS)
    status: Mapped[int] = mapped_column(default=int(Status.PENDING))
    victor: Mapped[int] = mapped_column(default=NO_COLOR)
    turn_color: Mapped[int] = mapped_column(default=NO_COLOR)
    # 256 bits do not fit any SQL integer type: stored as 64 hex digits
    board_state: Mapped[str] = mapped_column(String(64))
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
