from typing import List, Optional, Tuple
import logging

from sqlalchemy import case, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.matching_engine import classify_priority
from app.matching_engine.priority import HIGH, MEDIUM, LOW
from app.models.category import Category
from app.models.emergency_request import EmergencyRequest, RequestStatus
from app.models.resource import Resource, ResourceStatus
from app.models.volunteer import Volunteer, VolunteerStatus
from app.schemas.category_schema import CategoryResponse
from app.schemas.emergency_request_schema import (
    EmergencyRequestCreate,
    EmergencyRequestResponse,
    EmergencyRequestDetail,
)
from app.schemas.volunteer_schema import VolunteerResponse

logger = logging.getLogger(__name__)

PRIORITY_ORDER = case(
    (EmergencyRequest.priority == HIGH, 1),
    (EmergencyRequest.priority == MEDIUM, 2),
    (EmergencyRequest.priority == LOW, 3),
    else_=4
)


class EmergencyRequestService:

    @staticmethod
    def to_response(request: EmergencyRequest) -> EmergencyRequestResponse:
        data = EmergencyRequestResponse.model_validate(request).model_dump()
        if request.category is not None:
            data["category_name"] = request.category.name
            data["category_icon"] = request.category.icon
            data["category_color"] = request.category.color
        if request.assigned_volunteer is not None:
            data["volunteer_name"] = request.assigned_volunteer.name
            data["volunteer_phone"] = request.assigned_volunteer.phone
        return EmergencyRequestResponse(**data)

    @staticmethod
    def to_detail(request: EmergencyRequest) -> EmergencyRequestDetail:
        data = EmergencyRequestService.to_response(request).model_dump()
        return EmergencyRequestDetail(
            **data,
            category=(
                CategoryResponse.model_validate(request.category)
                if request.category else None
            ),
            assigned_volunteer=(
                VolunteerResponse.model_validate(request.assigned_volunteer)
                if request.assigned_volunteer else None
            )
        )

    @staticmethod
    def _with_details(stmt):
        return stmt.options(
            selectinload(EmergencyRequest.category),
            selectinload(EmergencyRequest.assigned_volunteer)
        ).execution_options(populate_existing=True)

    @staticmethod
    async def get_request(db: AsyncSession, request_id: int) -> Optional[EmergencyRequest]:
        result = await db.execute(
            EmergencyRequestService._with_details(
                select(EmergencyRequest).where(EmergencyRequest.id == request_id)
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def list_requests(
            db: AsyncSession,
            category_id: Optional[int] = None,
            assigned_volunteer_id: Optional[int] = None
    ) -> List[EmergencyRequest]:
        """Requests ordered high -> low priority, newest first within a priority."""
        stmt = select(EmergencyRequest)

        if category_id is not None:
            stmt = stmt.where(EmergencyRequest.category_id == category_id)

        if assigned_volunteer_id is not None:
            stmt = stmt.where(EmergencyRequest.assigned_volunteer_id == assigned_volunteer_id)

        stmt = stmt.order_by(
            PRIORITY_ORDER,
            EmergencyRequest.created_at.desc(),
            EmergencyRequest.id.desc()
        )

        result = await db.execute(EmergencyRequestService._with_details(stmt))
        return result.scalars().all()

    @staticmethod
    async def resolve_category_name(db: AsyncSession, category_id: Optional[int]) -> str:
        if category_id is None:
            return ""
        category = await db.get(Category, category_id)
        return category.name if category else ""

    @staticmethod
    async def create_request(
            db: AsyncSession,
            request_data: EmergencyRequestCreate
    ) -> Tuple[EmergencyRequest, str]:
        """
        Persist a new emergency request.

        The caller's priority is kept as-is; without one it is classified
        from the description and the category name.

        Returns:
            (saved request, resolved category name)
        """
        category_name = await EmergencyRequestService.resolve_category_name(
            db, request_data.category_id
        )

        data = request_data.model_dump(exclude={"priority"})

        if request_data.priority is not None:
            priority = request_data.priority.value
        else:
            priority = classify_priority(request_data.description, category_name)

        request = EmergencyRequest(
            **data,
            priority=priority,
            status=RequestStatus.OPEN.value
        )
        db.add(request)
        await db.commit()

        logger.info(
            f"Created emergency request {request.id} with priority {priority}"
            f"{' (auto)' if request_data.priority is None else ''}"
        )

        return await EmergencyRequestService.get_request(db, request.id), category_name

    @staticmethod
    async def get_statistics(db: AsyncSession) -> dict:

        async def count(stmt) -> int:
            result = await db.execute(stmt)
            return result.scalar() or 0

        return {
            "total_resources": await count(
                select(func.count(Resource.id)).where(
                    Resource.status == ResourceStatus.ACTIVE.value
                )
            ),
            "total_requests": await count(
                select(func.count(EmergencyRequest.id)).where(
                    EmergencyRequest.status != RequestStatus.CLOSED.value
                )
            ),
            "total_volunteers": await count(
                select(func.count(Volunteer.id)).where(
                    Volunteer.status == VolunteerStatus.ACTIVE.value
                )
            ),
            "high_priority_requests": await count(
                select(func.count(EmergencyRequest.id)).where(
                    EmergencyRequest.priority == HIGH,
                    EmergencyRequest.status == RequestStatus.OPEN.value
                )
            ),
        }
