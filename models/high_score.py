"""
High score model for finished rounds that beat the previous best.
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class HighScore(Base):
    """
    A new best score, recorded when a round ends above the previous best.

    Rows are only ever appended, so the current high score is the
    maximum stored value.
    """
    __tablename__ = "high_scores"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    value: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    achieved_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc)
    )

    def __repr__(self) -> str:
        return f"<HighScore(value={self.value}, achieved_at={self.achieved_at})>"
