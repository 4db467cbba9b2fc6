from typing import List, NamedTuple, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.businessLogic.emergency_request_service import EmergencyRequestService
from app.matching_engine import MatchResult, match_volunteers, required_skills_for
from app.models.emergency_request import EmergencyRequest
from app.models.volunteer import Volunteer, VolunteerStatus

logger = logging.getLogger(__name__)


class RequestMatches(NamedTuple):
    request: EmergencyRequest
    required_skills: str
    matches: List[MatchResult]


class MatchingService:

    @staticmethod
    async def get_active_volunteers(db: AsyncSession) -> List[Volunteer]:
        result = await db.execute(
            select(Volunteer)
            .where(Volunteer.status == VolunteerStatus.ACTIVE.value)
            .order_by(Volunteer.created_at.desc(), Volunteer.id.desc())
        )
        return result.scalars().all()

    @staticmethod
    async def match_for_request(
            db: AsyncSession,
            request_id: int,
            limit: int
    ) -> Optional[RequestMatches]:
        """
        Rank active volunteers for an existing emergency request.

        Returns:
            RequestMatches, or None when the request does not exist
        """
        request = await EmergencyRequestService.get_request(db, request_id)
        if request is None:
            return None

        category_name = request.category.name if request.category else None
        volunteers = await MatchingService.get_active_volunteers(db)

        matches = match_volunteers(request, volunteers, category_name, limit=limit)

        logger.info(
            f"Matched {len(matches)} of {len(volunteers)} active volunteers "
            f"for request {request.id}"
        )

        return RequestMatches(
            request=request,
            required_skills=required_skills_for(category_name),
            matches=matches
        )
