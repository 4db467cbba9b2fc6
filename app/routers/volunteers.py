from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from app.auth.dependencies import get_current_user
from app.businessLogic.emergency_request_service import EmergencyRequestService
from app.businessLogic.matching_service import MatchingService
from app.businessLogic.volunteer_service import VolunteerService
from app.core.config import settings
from app.core.database import get_db
from app.models.user import User
from app.models.volunteer import Volunteer, VolunteerStatus
from app.schemas.emergency_request_schema import EmergencyRequestList
from app.schemas.volunteer_schema import (
    VolunteerCreate, VolunteerUpdate, VolunteerResponse, VolunteerList,
    VolunteerStatusUpdate, VolunteerAvailabilityUpdate, VolunteerMatchResponse,
    VolunteerMatchList
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_volunteer_or_404(volunteer_id: int, db: AsyncSession) -> Volunteer:
    volunteer = await VolunteerService.get_volunteer(db, volunteer_id)

    if not volunteer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Volunteer not found"
        )

    return volunteer


@router.get("/", response_model=VolunteerList)
async def get_volunteers(
        skills: Optional[str] = Query(None),
        location: Optional[str] = Query(None),
        volunteer_status: VolunteerStatus = Query(VolunteerStatus.ACTIVE, alias="status"),
        db: AsyncSession = Depends(get_db)
):
    volunteers = await VolunteerService.search_volunteers(
        db,
        skills=skills,
        location=location,
        status=volunteer_status.value
    )

    filters = {"skills": skills, "location": location, "status": volunteer_status.value}

    return {
        "total": len(volunteers),
        "filters": {key: value for key, value in filters.items() if value is not None},
        "items": volunteers
    }


@router.get("/match/{request_id}", response_model=VolunteerMatchList)
async def match_volunteers_for_request(
        request_id: int,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(get_current_user)
):
    """
    Rank active volunteers for an emergency request.

    Scores combine required-skill overlap for the request's category,
    proximity to the request and a bonus for flexible availability.
    """
    result = await MatchingService.match_for_request(db, request_id, settings.MATCH_LIMIT)

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Emergency request not found"
        )

    items = [
        VolunteerMatchResponse(
            **VolunteerResponse.model_validate(match.volunteer).model_dump(),
            match_score=match.match_score,
            matching_skills=match.matching_skills
        )
        for match in result.matches
    ]

    return {
        "total": len(items),
        "request_info": {
            "id": result.request.id,
            "description": result.request.description,
            "priority": result.request.priority,
            "required_skills": result.required_skills,
        },
        "items": items
    }


@router.get("/{volunteer_id}", response_model=VolunteerResponse)
async def get_volunteer(volunteer_id: int, db: AsyncSession = Depends(get_db)):
    return await get_volunteer_or_404(volunteer_id, db)


@router.post("/register", response_model=VolunteerResponse, status_code=status.HTTP_201_CREATED)
async def register_volunteer(
        volunteer_data: VolunteerCreate,
        db: AsyncSession = Depends(get_db)
):
    if await VolunteerService.get_by_email(db, volunteer_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    volunteer = Volunteer(**volunteer_data.model_dump(), status=VolunteerStatus.ACTIVE.value)
    db.add(volunteer)
    await db.commit()
    await db.refresh(volunteer)

    logger.info(f"Volunteer {volunteer.id} registered ({volunteer.email})")

    return volunteer


@router.put("/{volunteer_id}", response_model=VolunteerResponse)
async def update_volunteer(
        volunteer_id: int,
        volunteer_update: VolunteerUpdate,
        db: AsyncSession = Depends(get_db)
):
    volunteer = await get_volunteer_or_404(volunteer_id, db)

    for field, value in volunteer_update.model_dump(exclude_unset=True).items():
        setattr(volunteer, field, value)

    await db.commit()
    await db.refresh(volunteer)

    return volunteer


@router.put("/{volunteer_id}/status", response_model=VolunteerResponse)
async def update_volunteer_status(
        volunteer_id: int,
        data: VolunteerStatusUpdate,
        db: AsyncSession = Depends(get_db)
):
    volunteer = await get_volunteer_or_404(volunteer_id, db)

    volunteer.status = data.status.value
    await db.commit()
    await db.refresh(volunteer)

    return volunteer


@router.get("/{volunteer_id}/assignments", response_model=EmergencyRequestList)
async def get_volunteer_assignments(volunteer_id: int, db: AsyncSession = Depends(get_db)):
    await get_volunteer_or_404(volunteer_id, db)

    requests = await EmergencyRequestService.list_requests(db, assigned_volunteer_id=volunteer_id)

    return {
        "total": len(requests),
        "items": [EmergencyRequestService.to_response(r) for r in requests]
    }


@router.post("/{volunteer_id}/availability", response_model=VolunteerResponse)
async def update_volunteer_availability(
        volunteer_id: int,
        data: VolunteerAvailabilityUpdate,
        db: AsyncSession = Depends(get_db)
):
    if data.availability is None and data.status is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update"
        )

    volunteer = await get_volunteer_or_404(volunteer_id, db)

    if data.availability is not None:
        volunteer.availability = data.availability
    if data.status is not None:
        volunteer.status = data.status.value

    await db.commit()
    await db.refresh(volunteer)

    return volunteer


@router.delete("/{volunteer_id}")
async def delete_volunteer(
        volunteer_id: int,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(get_current_user)
):
    volunteer = await get_volunteer_or_404(volunteer_id, db)

    # Soft delete
    volunteer.status = VolunteerStatus.INACTIVE.value
    await db.commit()

    return {"message": "Volunteer deleted successfully"}
