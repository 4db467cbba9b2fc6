from app.businessLogic.resource_service import ResourceService
from app.businessLogic.volunteer_service import VolunteerService
from app.businessLogic.emergency_request_service import EmergencyRequestService
from app.businessLogic.matching_service import MatchingService, RequestMatches

__all__ = [
    "ResourceService",
    "VolunteerService",
    "EmergencyRequestService",
    "MatchingService",
    "RequestMatches"
]
