from app.schemas.user_schema import (
    UserCreate, UserResponse, UserLogin, Token, ChangePasswordRequest
)
from app.schemas.category_schema import (
    CategoryResponse, CategoryDetail, CategoryList
)
from app.schemas.resource_schema import (
    ResourceCreate, ResourceUpdate, ResourceResponse, ResourceDetail, ResourceList
)
from app.schemas.volunteer_schema import (
    VolunteerCreate, VolunteerUpdate, VolunteerResponse, VolunteerList, VolunteerMatchList
)
from app.schemas.emergency_request_schema import (
    EmergencyRequestCreate, EmergencyRequestResponse, EmergencyRequestList, DashboardStats
)

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "Token", "ChangePasswordRequest",
    "CategoryResponse", "CategoryDetail", "CategoryList",
    "ResourceCreate", "ResourceUpdate", "ResourceResponse", "ResourceDetail", "ResourceList",
    "VolunteerCreate", "VolunteerUpdate", "VolunteerResponse", "VolunteerList", "VolunteerMatchList",
    "EmergencyRequestCreate", "EmergencyRequestResponse", "EmergencyRequestList", "DashboardStats",
]
