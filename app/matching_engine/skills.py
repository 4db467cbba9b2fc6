from typing import Dict, Optional

CATEGORY_REQUIRED_SKILLS: Dict[str, str] = {
    "Healthcare": "First Aid, Medical",
    "Transportation": "Transportation, Driving",
    "Food Distribution": "Food Service, General Help",
    "Emergency Services": "First Aid, Emergency Response",
    "Mental Health": "Counseling, Mental Health",
}


def required_skills_for(category_name: Optional[str]) -> str:
    """Required-skills string for a category name ("" when unmapped)."""
    if not isinstance(category_name, str):
        return ""
    return CATEGORY_REQUIRED_SKILLS.get(category_name, "")
