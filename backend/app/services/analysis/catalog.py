"""
Static legal catalogs keyed by offence group.

Built once at import and never mutated. Every table has an entry for the
default group ("criminal") except precedents, where no entry means no case law.
"""
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from app.services.analysis.models import Category, PrecedentSummary, SectionSuggestion

DEFAULT_GROUP = "criminal"

IPC = "Indian Penal Code, 1860"
CRPC = "Code of Criminal Procedure, 1973"
IT_ACT = "Information Technology Act, 2000"
SUPREME_COURT = "Supreme Court of India"

SECTION_CATALOG: Mapping[str, Tuple[SectionSuggestion, ...]] = MappingProxyType({
    "theft": (
        SectionSuggestion(
            section_code="Section 378",
            act_name=IPC,
            description="Theft - Dishonestly taking movable property",
            applicability_score=95,
            category=Category.CRIMINAL,
        ),
        SectionSuggestion(
            section_code="Section 379",
            act_name=IPC,
            description="Punishment for theft",
            applicability_score=95,
            category=Category.CRIMINAL,
        ),
    ),
    "assault": (
        SectionSuggestion(
            section_code="Section 321",
            act_name=IPC,
            description="Voluntarily causing hurt",
            applicability_score=90,
            category=Category.CRIMINAL,
        ),
        SectionSuggestion(
            section_code="Section 324",
            act_name=IPC,
            description="Voluntarily causing hurt by dangerous weapons",
            applicability_score=85,
            category=Category.CRIMINAL,
        ),
    ),
    "cybercrime": (
        SectionSuggestion(
            section_code="Section 66",
            act_name=IT_ACT,
            description="Computer related offences",
            applicability_score=92,
            category=Category.CYBERCRIME,
        ),
        SectionSuggestion(
            section_code="Section 66C",
            act_name=IT_ACT,
            description="Identity theft",
            applicability_score=88,
            category=Category.CYBERCRIME,
        ),
    ),
    DEFAULT_GROUP: (
        SectionSuggestion(
            section_code="Section 107",
            act_name=CRPC,
            description="Security for keeping the peace",
            applicability_score=70,
            category=Category.CRIMINAL,
        ),
    ),
})

PRECEDENT_CATALOG: Mapping[str, Tuple[PrecedentSummary, ...]] = MappingProxyType({
    "theft": (
        PrecedentSummary(
            title="State of Maharashtra v. Mayer Hans George",
            citation="AIR 1965 SC 722",
            court=SUPREME_COURT,
            year=1965,
            relevance_score=88,
            summary="Defines the essential elements of theft under Section 378 IPC",
        ),
    ),
    "assault": (
        PrecedentSummary(
            title="Virsa Singh v. State of Punjab",
            citation="AIR 1958 SC 465",
            court=SUPREME_COURT,
            year=1958,
            relevance_score=85,
            summary="Distinction between simple and grievous hurt",
        ),
    ),
    "cybercrime": (
        PrecedentSummary(
            title="Shreya Singhal v. Union of India",
            citation="AIR 2015 SC 1523",
            court=SUPREME_COURT,
            year=2015,
            relevance_score=80,
            summary="Landmark case on cyber laws and freedom of speech",
        ),
    ),
})

RECOMMENDATION_CATALOG: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "theft": (
        "Collect CCTV footage if available",
        "Record witness statements",
        "Prepare detailed inventory of stolen items",
        "Check for fingerprints at the scene",
    ),
    "assault": (
        "Obtain medical examination report",
        "Photograph injuries",
        "Record victim statement",
        "Identify and interview witnesses",
    ),
    "cybercrime": (
        "Preserve digital evidence",
        "Take screenshots of online content",
        "Record IP addresses and timestamps",
        "Contact cybercrime investigation team",
    ),
    DEFAULT_GROUP: (
        "Conduct thorough investigation",
        "Record all witness statements",
        "Collect physical evidence",
        "Maintain chain of custody",
    ),
})

# Category each precedent group belongs to, used when filtering catalog searches
GROUP_CATEGORIES: Mapping[str, Category] = MappingProxyType({
    "theft": Category.CRIMINAL,
    "assault": Category.CRIMINAL,
    "cybercrime": Category.CYBERCRIME,
    DEFAULT_GROUP: Category.CRIMINAL,
})


def catalog_key(key: Union[str, Category]) -> str:
    """Normalise an offence group name or Category to a catalog key."""
    if isinstance(key, Category):
        return key.value
    return (key or "").strip().lower()
