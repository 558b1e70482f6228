"""
Section Recommender, Precedent Retriever and Recommendation Composer.

All three are lookups into the read-only tables in catalog.py. Callers get
fresh lists so nothing they do can reach back into the catalog.
"""
from typing import List, Union

from app.services.analysis.catalog import (
    DEFAULT_GROUP, PRECEDENT_CATALOG, RECOMMENDATION_CATALOG, SECTION_CATALOG, catalog_key,
)
from app.services.analysis.models import Category, PrecedentSummary, SectionSuggestion


def recommend(key: Union[str, Category]) -> List[SectionSuggestion]:
    """Candidate sections for an offence group; unknown groups get the generic CrPC entry."""
    entries = SECTION_CATALOG.get(catalog_key(key), SECTION_CATALOG[DEFAULT_GROUP])
    return [entry.model_copy() for entry in entries]


def retrieve(key: Union[str, Category]) -> List[PrecedentSummary]:
    """Precedents for an offence group. May be empty."""
    entries = PRECEDENT_CATALOG.get(catalog_key(key), ())
    return [entry.model_copy() for entry in entries]


def compose(key: Union[str, Category]) -> List[str]:
    """Investigative checklist for an offence group. Never empty."""
    return list(RECOMMENDATION_CATALOG.get(catalog_key(key), RECOMMENDATION_CATALOG[DEFAULT_GROUP]))
