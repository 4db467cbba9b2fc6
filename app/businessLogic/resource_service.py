from typing import Dict, List, Optional, Any
import logging

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from app.models.resource import Resource, ResourceStatus
from app.schemas.category_schema import CategoryResponse
from app.schemas.resource_schema import ResourceResponse, ResourceDetail

logger = logging.getLogger(__name__)

# Rough km -> degree conversion used by the radius filter
KM_PER_DEGREE = 111.0


class ResourceService:

    @staticmethod
    def to_response(resource: Resource) -> ResourceResponse:
        data = ResourceResponse.model_validate(resource).model_dump()
        if resource.category is not None:
            data["category_name"] = resource.category.name
            data["category_icon"] = resource.category.icon
            data["category_color"] = resource.category.color
        return ResourceResponse(**data)

    @staticmethod
    def to_detail(resource: Resource) -> ResourceDetail:
        data = ResourceService.to_response(resource).model_dump()
        category = resource.category
        return ResourceDetail(
            **data,
            category=CategoryResponse.model_validate(category) if category else None
        )

    @staticmethod
    async def get_resource(db: AsyncSession, resource_id: int) -> Optional[Resource]:
        result = await db.execute(
            select(Resource)
            .options(selectinload(Resource.category))
            .where(Resource.id == resource_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def search_resources(
            db: AsyncSession,
            filters: Dict[str, Any]
    ) -> List[Resource]:
        """
        Search active resources.

        Args:
            db: Database session
            filters: Any of category_id, search, latitude, longitude, radius (km)

        Returns:
            Matching resources, newest first
        """
        stmt = (
            select(Resource)
            .options(selectinload(Resource.category))
            .where(Resource.status == ResourceStatus.ACTIVE.value)
        )

        if filters.get("category_id") is not None:
            stmt = stmt.where(Resource.category_id == filters["category_id"])

        if filters.get("search"):
            search_term = f"%{filters['search']}%"
            stmt = stmt.where(
                or_(
                    Resource.name.ilike(search_term),
                    Resource.description.ilike(search_term)
                )
            )

        latitude = filters.get("latitude")
        longitude = filters.get("longitude")
        radius = filters.get("radius")

        if latitude is not None and longitude is not None and radius:
            # Squared degree distance, good enough at city scale
            radius_squared = (radius / KM_PER_DEGREE) ** 2
            stmt = stmt.where(
                Resource.latitude.is_not(None),
                Resource.longitude.is_not(None),
                (Resource.latitude - latitude) * (Resource.latitude - latitude)
                + (Resource.longitude - longitude) * (Resource.longitude - longitude)
                <= radius_squared
            )

        stmt = stmt.order_by(Resource.created_at.desc(), Resource.id.desc())
        result = await db.execute(stmt)
        resources = result.scalars().all()

        logger.debug(f"Resource search {filters} returned {len(resources)} rows")

        return resources
