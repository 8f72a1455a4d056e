"""
Ziplan Preference Models
Append-only store of submitted cooking preference sets
"""

from sqlalchemy import Integer, Float, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from typing import Any, List, Optional

from core.database import Base
from models.base import utcnow


class PreferenceSet(Base):
    """
    One preference submission. Rows are never updated; the newest row
    is the one recipe generation reads. Not associated with any user.
    """
    __tablename__ = "preference_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dietary: Mapped[List[Any]] = mapped_column(JSON, nullable=False, default=list)
    equipment: Mapped[List[Any]] = mapped_column(JSON, nullable=False, default=list)
    budget: Mapped[float] = mapped_column(Float, nullable=False)
    cooking_hours: Mapped[float] = mapped_column(Float, nullable=False)
    meal_times: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<PreferenceSet(id={self.id}, created_at={self.created_at})>"
