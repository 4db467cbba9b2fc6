from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.auth.dependencies import get_current_user, require_admin
from app.businessLogic.emergency_request_service import EmergencyRequestService
from app.businessLogic.volunteer_service import VolunteerService
from app.core.database import get_db
from app.models.emergency_request import EmergencyRequest, RequestStatus
from app.models.user import User
from app.models.volunteer import VolunteerStatus
from app.notifications import broadcaster, ADMIN_ROOM, volunteer_room
from app.schemas.emergency_request_schema import (
    EmergencyRequestCreate, EmergencyRequestResponse, EmergencyRequestDetail,
    EmergencyRequestCreated, EmergencyRequestList, StatusUpdate, AssignVolunteer,
    DashboardStats
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_request_or_404(request_id: int, db: AsyncSession) -> EmergencyRequest:
    request = await EmergencyRequestService.get_request(db, request_id)

    if not request:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Emergency request not found"
        )

    return request


@router.get("/", response_model=EmergencyRequestList)
async def get_emergency_requests(db: AsyncSession = Depends(get_db)):
    requests = await EmergencyRequestService.list_requests(db)

    return {
        "total": len(requests),
        "items": [EmergencyRequestService.to_response(r) for r in requests]
    }


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(db: AsyncSession = Depends(get_db)):
    return await EmergencyRequestService.get_statistics(db)


@router.get("/{request_id}", response_model=EmergencyRequestDetail)
async def get_emergency_request(request_id: int, db: AsyncSession = Depends(get_db)):
    request = await get_request_or_404(request_id, db)
    return EmergencyRequestService.to_detail(request)


@router.post("/", response_model=EmergencyRequestCreated, status_code=status.HTTP_201_CREATED)
async def create_emergency_request(
        request_data: EmergencyRequestCreate,
        db: AsyncSession = Depends(get_db)
):
    """
    Submit a new emergency request.

    Without an explicit priority one is assigned from the description
    and category; the assigned value is returned as priority_assigned.
    """
    request, category_name = await EmergencyRequestService.create_request(db, request_data)
    response = EmergencyRequestService.to_response(request)

    await broadcaster.publish(
        "new-emergency",
        {**response.model_dump(), "category_name": category_name or None},
        room=ADMIN_ROOM
    )

    return {
        "message": "Emergency request submitted successfully",
        "priority_assigned": request.priority,
        "item": response
    }


@router.put("/{request_id}/status", response_model=EmergencyRequestResponse)
async def update_request_status(
        request_id: int,
        data: StatusUpdate,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(get_current_user)
):
    request = await get_request_or_404(request_id, db)

    request.status = data.status.value
    if data.assigned_volunteer_id is not None:
        request.assigned_volunteer_id = data.assigned_volunteer_id
    if data.notes is not None:
        request.notes = data.notes

    await db.commit()

    request = await get_request_or_404(request_id, db)
    response = EmergencyRequestService.to_response(request)

    logger.info(f"Request {request.id} set to {request.status} by {current_user.email}")

    await broadcaster.publish("request-status-updated", response)

    return response


@router.put("/{request_id}/assign", response_model=EmergencyRequestResponse)
async def assign_volunteer(
        request_id: int,
        data: AssignVolunteer,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(get_current_user)
):
    request = await get_request_or_404(request_id, db)

    volunteer = await VolunteerService.get_volunteer(db, data.volunteer_id)
    if not volunteer or volunteer.status != VolunteerStatus.ACTIVE.value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Volunteer not found or inactive"
        )

    request.assigned_volunteer_id = volunteer.id
    request.status = RequestStatus.IN_PROGRESS.value
    await db.commit()

    request = await get_request_or_404(request_id, db)
    response = EmergencyRequestService.to_response(request)

    logger.info(f"Volunteer {volunteer.id} assigned to request {request.id}")

    await broadcaster.publish("request-assigned", response, room=volunteer_room(volunteer.id))

    return response


@router.delete("/{request_id}")
async def delete_emergency_request(
        request_id: int,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(require_admin)
):
    request = await get_request_or_404(request_id, db)

    await db.delete(request)
    await db.commit()

    logger.info(f"Request {request_id} deleted by {current_user.email}")

    return {"message": "Emergency request deleted successfully"}
