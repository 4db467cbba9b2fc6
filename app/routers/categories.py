from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.businessLogic.emergency_request_service import EmergencyRequestService
from app.businessLogic.resource_service import ResourceService
from app.core.database import get_db
from app.models.category import Category
from app.models.emergency_request import EmergencyRequest, RequestStatus
from app.models.resource import Resource, ResourceStatus
from app.schemas.category_schema import CategoryDetail, CategoryList, CategoryResponse

router = APIRouter()


async def get_category_or_404(category_id: int, db: AsyncSession) -> Category:
    category = await db.get(Category, category_id)

    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )

    return category


@router.get("/", response_model=CategoryList)
async def get_categories(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Category).order_by(Category.name))
    categories = result.scalars().all()

    return {
        "total": len(categories),
        "items": categories
    }


@router.get("/{category_id}", response_model=CategoryDetail)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await get_category_or_404(category_id, db)

    resources = await db.execute(
        select(func.count(Resource.id)).where(
            Resource.category_id == category_id,
            Resource.status == ResourceStatus.ACTIVE.value
        )
    )
    requests = await db.execute(
        select(func.count(EmergencyRequest.id)).where(
            EmergencyRequest.category_id == category_id
        )
    )
    active_requests = await db.execute(
        select(func.count(EmergencyRequest.id)).where(
            EmergencyRequest.category_id == category_id,
            EmergencyRequest.status.in_([
                RequestStatus.OPEN.value,
                RequestStatus.IN_PROGRESS.value
            ])
        )
    )

    return CategoryDetail(
        **CategoryResponse.model_validate(category).model_dump(),
        stats={
            "resources": resources.scalar() or 0,
            "requests": requests.scalar() or 0,
            "active_requests": active_requests.scalar() or 0,
        }
    )


@router.get("/{category_id}/resources")
async def get_category_resources(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await get_category_or_404(category_id, db)
    resources = await ResourceService.search_resources(db, {"category_id": category_id})

    return {
        "total": len(resources),
        "category": CategoryResponse.model_validate(category),
        "items": [ResourceService.to_response(r) for r in resources]
    }


@router.get("/{category_id}/requests")
async def get_category_requests(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await get_category_or_404(category_id, db)
    requests = await EmergencyRequestService.list_requests(db, category_id=category_id)

    return {
        "total": len(requests),
        "category": CategoryResponse.model_validate(category),
        "items": [EmergencyRequestService.to_response(r) for r in requests]
    }
