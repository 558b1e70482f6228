"""
Entity Extractor
Pulls persons, locations, dates and offence keywords out of incident text
using fixed pattern tables. No linguistic validation is attempted, so a
sentence-initial pair like "Last Monday" is reported as a person.
"""
import logging
import re
from typing import List, Sequence
from re import Pattern

from app.services.analysis.models import EntityBundle

logger = logging.getLogger(__name__)

# ----------------------------------------
# PATTERN TABLES
# ----------------------------------------
PERSON_PATTERNS: Sequence[Pattern] = (
    re.compile(r"\b[A-Z][a-z]+\s+[A-Z][a-z]+\b", re.ASCII),
)

LOCATION_INDICATORS: Sequence[str] = (
    "street", "road", "avenue", "lane", "market", "station", "hospital", "school",
)

LOCATION_PATTERNS: Sequence[Pattern] = tuple(
    re.compile(rf"\b\w+\s+{word}\b", re.IGNORECASE | re.ASCII) for word in LOCATION_INDICATORS
)

MONTH_NAMES: Sequence[str] = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

DATE_PATTERNS: Sequence[Pattern] = (
    re.compile(r"\b\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}\b", re.ASCII),
    re.compile(rf"\b\d{{1,2}}\s+(?:{'|'.join(MONTH_NAMES)})\s+\d{{4}}\b", re.IGNORECASE | re.ASCII),
)

CRIME_KEYWORDS: Sequence[str] = (
    "theft", "robbery", "assault", "murder", "kidnapping",
    "fraud", "cheating", "harassment", "dowry", "rape",
)


def _scan(text: str, patterns: Sequence[Pattern]) -> List[str]:
    """Run every pattern and return all matches ordered by position in the text."""
    hits = []
    for rank, pattern in enumerate(patterns):
        for match in pattern.finditer(text):
            hits.append((match.start(), rank, match.group(0)))
    hits.sort(key=lambda hit: (hit[0], hit[1]))
    return [value for _, _, value in hits]


def extract_persons(text: str) -> List[str]:
    return _scan(text, PERSON_PATTERNS)


def extract_locations(text: str) -> List[str]:
    return _scan(text, LOCATION_PATTERNS)


def extract_dates(text: str) -> List[str]:
    return _scan(text, DATE_PATTERNS)


def extract_crime_keywords(text: str) -> List[str]:
    lowered = text.lower()
    return [keyword for keyword in CRIME_KEYWORDS if keyword in lowered]


def extract(text: str) -> EntityBundle:
    """
    Extract all entity kinds from free text.

    Never raises; kinds with no matches come back as empty lists.
    """
    bundle = EntityBundle(
        persons=extract_persons(text),
        locations=extract_locations(text),
        dates=extract_dates(text),
        crime_keywords=extract_crime_keywords(text),
    )
    logger.debug(
        f"Extracted entities: persons={len(bundle.persons)}, locations={len(bundle.locations)}, "
        f"dates={len(bundle.dates)}, crime_keywords={bundle.crime_keywords}"
    )
    return bundle
