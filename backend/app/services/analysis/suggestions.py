from typing import List, Optional

from app.core.config import settings

INCIDENT_SUGGESTIONS = (
    "Theft of mobile phone",
    "Assault and battery",
    "Domestic violence",
    "Cybercrime - online fraud",
    "Traffic violation",
    "Property dispute",
    "Harassment case",
    "Missing person report",
)


def suggest_incidents(query: str, limit: Optional[int] = None) -> List[str]:
    """Incident-type labels containing the query, case-insensitive."""
    limit = settings.SUGGESTION_LIMIT if limit is None else limit
    needle = (query or "").strip().lower()
    matches = [label for label in INCIDENT_SUGGESTIONS if needle in label.lower()]
    return matches[:max(limit, 0)]
