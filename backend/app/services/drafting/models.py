from typing import Optional
from pydantic import BaseModel, Field, field_validator

from app.services.analysis.models import AnalysisResult

class FirDraftRequest(BaseModel):
    complainant_name: str = Field(..., min_length=1, description="Name of the person reporting the incident")
    incident_description: str = Field(..., description="Free-text account of the incident")
    incident_type: str = Field(default="", description="Incident type selected by the officer")
    incident_date: str = Field(default="", description="When it happened, as reported")
    incident_location: str = Field(default="", description="Where it happened")
    police_station: Optional[str] = Field(None, description="Registering police station")

    @field_validator("complainant_name")
    @classmethod
    def complainant_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Complainant name must not be blank")
        return value

class FirDraftResponse(BaseModel):
    fir_number: str = Field(..., description="e.g. FIR/2024/0042")
    draft_text: str
    analysis: AnalysisResult
