from app.matching_engine.priority import classify_priority
from app.matching_engine.matcher import MatchResult, match_volunteers
from app.matching_engine.skills import CATEGORY_REQUIRED_SKILLS, required_skills_for

__all__ = [
    "classify_priority",
    "MatchResult",
    "match_volunteers",
    "CATEGORY_REQUIRED_SKILLS",
    "required_skills_for",
]
