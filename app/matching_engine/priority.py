from typing import Optional

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

HIGH_PRIORITY_KEYWORDS = (
    "emergency",
    "urgent",
    "critical",
    "life-threatening",
    "immediate",
    "ambulance",
    "fire",
    "bleeding",
    "unconscious",
    "severe",
    "accident",
)

LOW_PRIORITY_KEYWORDS = (
    "information",
    "question",
    "routine",
    "schedule",
    "appointment",
    "general",
    "inquiry",
    "non-urgent",
)


def _contains_any(text: str, keywords) -> bool:
    # Plain substring matching: "fireplace" counts as "fire"
    return any(keyword in text for keyword in keywords)


def classify_priority(description: Optional[str], category_name: Optional[str] = None) -> str:
    """
    Derive a request priority from its free-text description.

    Rules are checked in order and the first hit wins:
    high keyword in the description, then an "emergency" category,
    then a low keyword in the description, otherwise medium.

    Args:
        description: Incident description (may be empty or None)
        category_name: Resolved category name, if any

    Returns:
        "high", "medium" or "low"
    """
    text = description.lower() if isinstance(description, str) else ""

    if _contains_any(text, HIGH_PRIORITY_KEYWORDS):
        return HIGH

    if isinstance(category_name, str) and "emergency" in category_name.lower():
        return HIGH

    if _contains_any(text, LOW_PRIORITY_KEYWORDS):
        return LOW

    return MEDIUM
