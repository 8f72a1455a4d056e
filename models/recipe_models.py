"""
Ziplan Recipe Models
Database model for generated recipes
"""

from sqlalchemy import Integer, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from typing import Any, List

from core.database import Base
from models.base import utcnow


class Recipe(Base):
    """Generated recipe paired with the ingredients it was generated from"""
    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ingredients: Mapped[List[Any]] = mapped_column(JSON, nullable=False)
    recipe_text: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
