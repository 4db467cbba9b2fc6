from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from app.auth.dependencies import require_admin
from app.businessLogic.resource_service import ResourceService
from app.core.database import get_db
from app.models.resource import Resource, ResourceStatus
from app.models.user import User
from app.notifications import broadcaster
from app.schemas.resource_schema import (
    ResourceCreate, ResourceUpdate, ResourceResponse, ResourceDetail, ResourceList,
    AvailabilityUpdate
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_resource_or_404(resource_id: int, db: AsyncSession) -> Resource:
    resource = await ResourceService.get_resource(db, resource_id)

    if not resource:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Resource not found"
        )

    return resource


@router.get("/", response_model=ResourceList)
async def get_resources(
        category: Optional[int] = Query(None),
        search: Optional[str] = Query(None),
        lat: Optional[float] = Query(None, ge=-90, le=90),
        lng: Optional[float] = Query(None, ge=-180, le=180),
        radius: Optional[float] = Query(None, gt=0),
        db: AsyncSession = Depends(get_db)
):
    filters = {
        "category_id": category,
        "search": search,
        "latitude": lat,
        "longitude": lng,
        "radius": radius,
    }
    # Echo only the filters that were supplied
    filters = {key: value for key, value in filters.items() if value is not None}

    resources = await ResourceService.search_resources(db, filters)

    return {
        "total": len(resources),
        "filters": filters,
        "items": [ResourceService.to_response(r) for r in resources]
    }


@router.get("/{resource_id}", response_model=ResourceDetail)
async def get_resource(resource_id: int, db: AsyncSession = Depends(get_db)):
    resource = await get_resource_or_404(resource_id, db)
    return ResourceService.to_detail(resource)


@router.post("/", response_model=ResourceResponse, status_code=status.HTTP_201_CREATED)
async def create_resource(
        resource_data: ResourceCreate,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(require_admin)
):
    resource = Resource(**resource_data.model_dump(), status=ResourceStatus.ACTIVE.value)
    db.add(resource)
    await db.commit()

    logger.info(f"Resource {resource.id} '{resource.name}' created by {current_user.email}")

    resource = await get_resource_or_404(resource.id, db)
    return ResourceService.to_response(resource)


@router.put("/{resource_id}", response_model=ResourceResponse)
async def update_resource(
        resource_id: int,
        resource_update: ResourceUpdate,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(require_admin)
):
    resource = await get_resource_or_404(resource_id, db)

    for field, value in resource_update.model_dump(exclude_unset=True).items():
        setattr(resource, field, value)

    await db.commit()

    resource = await get_resource_or_404(resource_id, db)
    return ResourceService.to_response(resource)


@router.delete("/{resource_id}")
async def delete_resource(
        resource_id: int,
        db: AsyncSession = Depends(get_db),
        current_user: User = Depends(require_admin)
):
    resource = await get_resource_or_404(resource_id, db)

    # Soft delete
    resource.status = ResourceStatus.INACTIVE.value
    await db.commit()

    return {"message": "Resource deleted successfully"}


@router.post("/{resource_id}/update-availability", response_model=ResourceResponse)
async def update_availability(
        resource_id: int,
        data: AvailabilityUpdate,
        db: AsyncSession = Depends(get_db)
):
    resource = await get_resource_or_404(resource_id, db)

    resource.current_availability = data.current_availability
    await db.commit()

    resource = await get_resource_or_404(resource_id, db)
    response = ResourceService.to_response(resource)

    await broadcaster.publish("resource-updated", {
        "id": resource.id,
        "current_availability": resource.current_availability,
        "resource": response,
    })

    return response
