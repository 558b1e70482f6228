"""
Pydantic models for incident analysis
"""
from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class InvalidInputError(ValueError):
    """Raised when an incident description is empty or blank."""


class Category(str, Enum):
    CRIMINAL = "criminal"
    CYBERCRIME = "cybercrime"
    CIVIL = "civil"
    TRAFFIC = "traffic"
    DOMESTIC = "domestic"


class IncidentText(BaseModel):
    """Raw input for a single analysis call"""
    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Free-text incident description")
    incident_type_hint: str = Field(default="", description="Incident type selected by the officer")


class EntityBundle(BaseModel):
    """Fragments pulled out of the description by pattern rules"""
    model_config = ConfigDict(frozen=True)

    persons: List[str] = Field(default_factory=list)
    locations: List[str] = Field(default_factory=list)
    dates: List[str] = Field(default_factory=list)
    crime_keywords: List[str] = Field(default_factory=list)


class SectionSuggestion(BaseModel):
    """Candidate statutory section for an offence group"""
    model_config = ConfigDict(frozen=True)

    section_code: str = Field(..., description="e.g. Section 378")
    act_name: str = Field(..., description="e.g. Indian Penal Code, 1860")
    description: str
    applicability_score: int = Field(..., ge=0, le=100)
    category: Category


class PrecedentSummary(BaseModel):
    """Case law summary attached to an offence group"""
    model_config = ConfigDict(frozen=True)

    title: str
    citation: str
    court: str
    year: int
    relevance_score: int = Field(..., ge=0, le=100)
    summary: str


class AnalysisResult(BaseModel):
    """Structured guidance returned for one incident description"""
    model_config = ConfigDict(frozen=True)

    confidence: float = Field(..., ge=0, le=100)
    category: Category
    offence_group: str = Field(..., description="Name of the classification rule that fired")
    incident_type_hint: str = ""
    suggested_sections: List[SectionSuggestion]
    relevant_case_laws: List[PrecedentSummary]
    recommendations: List[str]
    entities: EntityBundle


class AnalysisRequest(BaseModel):
    description: str = Field(..., description="Incident description typed or transcribed by the officer")
    incident_type_hint: str = Field(default="", description="Selected incident type label, may be empty")


class SuggestionResponse(BaseModel):
    query: str
    suggestions: List[str]


class LegalSection(BaseModel):
    """Statutory section as listed in the legal database"""
    model_config = ConfigDict(frozen=True)

    section_code: str
    act_name: str
    title: str
    description: str
    category: str
    keywords: List[str] = Field(default_factory=list)
    related_sections: List[str] = Field(default_factory=list)
    punishment: str = ""
    is_bailable: Optional[bool] = None
    is_cognizable: Optional[bool] = None


class CaseLawRecord(BaseModel):
    """Case law as listed in the legal database"""
    model_config = ConfigDict(frozen=True)

    title: str
    citation: str
    court: str
    year: int
    summary: str
    category: str
    importance: str = Field(default="reference", description="landmark, significant or reference")
    key_points: List[str] = Field(default_factory=list)
    sections: List[str] = Field(default_factory=list)


class LandmarkJudgment(BaseModel):
    model_config = ConfigDict(frozen=True)

    case: str
    court: str
    year: int
    significance: str
    impact: str
    key_principles: List[str] = Field(default_factory=list)
    legal_doctrine: str = ""
    precedent: str = ""


class CatalogSearchResult(BaseModel):
    """One page of matches from the legal database"""
    query: str
    category: Optional[str] = None
    page: int = 1
    limit: int = 10
    sections: List[LegalSection] = Field(default_factory=list)
    precedents: List[CaseLawRecord] = Field(default_factory=list)
    judgments: List[LandmarkJudgment] = Field(default_factory=list)
    total_sections: int = 0
    total_precedents: int = 0
    total_judgments: int = 0
