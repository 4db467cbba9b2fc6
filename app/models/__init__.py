from app.models.user import User
from app.models.category import Category
from app.models.resource import Resource
from app.models.volunteer import Volunteer
from app.models.emergency_request import EmergencyRequest

__all__ = [
    "User",
    "Category",
    "Resource",
    "Volunteer",
    "EmergencyRequest",
]
