"""
Ziplan Preference Service
Stores cooking preference sets and reads back the newest one
"""

from typing import Any, List, Optional
import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ValidationError
from middleware.logging import log_business_event
from models.preference_models import PreferenceSet

logger = structlog.get_logger()


class PreferenceService:

    async def save_preferences(
        self,
        db: AsyncSession,
        dietary: Optional[List[str]],
        equipment: Optional[List[str]],
        budget: Optional[float],
        cooking_hours: Optional[float],
        meal_times: Any = None,
    ) -> PreferenceSet:
        """Insert a new preference set; earlier sets are left untouched"""
        if dietary is None or equipment is None or budget is None or cooking_hours is None:
            raise ValidationError("Invalid preferences data")

        prefs = PreferenceSet(
            dietary=dietary,
            equipment=equipment,
            budget=budget,
            cooking_hours=cooking_hours,
            meal_times=meal_times,
        )
        db.add(prefs)
        await db.commit()
        await db.refresh(prefs)

        log_business_event("preferences_saved", {"preference_set_id": prefs.id})
        return prefs

    async def latest(self, db: AsyncSession) -> Optional[PreferenceSet]:
        result = await db.execute(
            select(PreferenceSet)
            .order_by(PreferenceSet.created_at.desc(), PreferenceSet.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()


preference_service = PreferenceService()
