from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.volunteer import Volunteer

logger = logging.getLogger(__name__)


class VolunteerService:

    @staticmethod
    async def get_volunteer(db: AsyncSession, volunteer_id: int) -> Optional[Volunteer]:
        result = await db.execute(
            select(Volunteer).where(Volunteer.id == volunteer_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[Volunteer]:
        result = await db.execute(
            select(Volunteer).where(Volunteer.email == email)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def search_volunteers(
            db: AsyncSession,
            skills: Optional[str] = None,
            location: Optional[str] = None,
            status: Optional[str] = None
    ) -> List[Volunteer]:
        stmt = select(Volunteer)

        if skills:
            stmt = stmt.where(Volunteer.skills.ilike(f"%{skills}%"))

        if location:
            stmt = stmt.where(Volunteer.location.ilike(f"%{location}%"))

        if status:
            stmt = stmt.where(Volunteer.status == status)

        stmt = stmt.order_by(Volunteer.created_at.desc(), Volunteer.id.desc())
        result = await db.execute(stmt)
        return result.scalars().all()
