import math
from typing import Any, Iterable, List, NamedTuple, Optional

from app.matching_engine.skills import required_skills_for

DEFAULT_MATCH_LIMIT = 10

SKILL_POINTS = 10
PROXIMITY_MAX_POINTS = 10
FLEXIBLE_BONUS = 5

ACTIVE_STATUS = "active"


class MatchResult(NamedTuple):
    volunteer: Any
    match_score: int
    matching_skills: str


def _text(value) -> str:
    return value if isinstance(value, str) else ""


def _coordinates(record) -> Optional[tuple]:
    latitude = getattr(record, "latitude", None)
    longitude = getattr(record, "longitude", None)
    # A zero coordinate counts as missing
    if not latitude or not longitude:
        return None
    try:
        return float(latitude), float(longitude)
    except (TypeError, ValueError):
        return None


def skill_score(required_skills: str, volunteer_skills: str) -> int:
    """10 points per required skill found (substring) in the volunteer's skills."""
    if not required_skills or not volunteer_skills:
        return 0

    skills = volunteer_skills.lower()
    matched = [
        token for token in (part.strip() for part in required_skills.lower().split(","))
        if token in skills
    ]
    return len(matched) * SKILL_POINTS


def proximity_score(request, volunteer) -> float:
    """
    Linear decay from 10 at the same point to 0 at one degree away.

    Distance is Euclidean over raw lat/lng degrees, not a geodesic.
    """
    origin = _coordinates(request)
    target = _coordinates(volunteer)
    if origin is None or target is None:
        return 0.0

    distance = math.sqrt((origin[0] - target[0]) ** 2 + (origin[1] - target[1]) ** 2)
    return max(0.0, PROXIMITY_MAX_POINTS - distance * PROXIMITY_MAX_POINTS)


def availability_score(availability: str) -> int:
    return FLEXIBLE_BONUS if "flexible" in availability.lower() else 0


def score_volunteer(request, volunteer, required_skills: str) -> int:
    total = (
        skill_score(required_skills, _text(getattr(volunteer, "skills", None)))
        + proximity_score(request, volunteer)
        + availability_score(_text(getattr(volunteer, "availability", None)))
    )
    # Half rounds up
    return int(math.floor(total + 0.5))


def match_volunteers(
        request,
        candidates: Iterable[Any],
        category_name: Optional[str] = None,
        limit: int = DEFAULT_MATCH_LIMIT
) -> List[MatchResult]:
    """
    Rank volunteers for an emergency request.

    Args:
        request: Object exposing latitude/longitude
        candidates: Volunteer records (inactive/busy ones are skipped)
        category_name: Name of the request's category, if it has one
        limit: Maximum number of results, never above DEFAULT_MATCH_LIMIT

    Returns:
        MatchResult list, highest score first, pool order kept on ties
    """
    required_skills = required_skills_for(category_name)

    scored = [
        MatchResult(
            volunteer=volunteer,
            match_score=score_volunteer(request, volunteer, required_skills),
            matching_skills=required_skills,
        )
        for volunteer in (candidates or [])
        if getattr(volunteer, "status", None) == ACTIVE_STATUS
    ]

    # sorted() is stable, also with reverse=True
    ranked = sorted(scored, key=lambda result: result.match_score, reverse=True)
    return ranked[:max(min(limit, DEFAULT_MATCH_LIMIT), 0)]
