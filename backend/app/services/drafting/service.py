import logging
import random
from datetime import date
from typing import List, Optional

from app.core.config import settings
from app.services.analysis.models import AnalysisResult, SectionSuggestion
from app.services.analysis.service import AnalysisService, analysis_service
from app.services.drafting.models import FirDraftRequest, FirDraftResponse
from app.services.drafting.templates import FIR_TEMPLATE

logger = logging.getLogger(__name__)

NOT_PROVIDED = "Not provided"

def generate_fir_number(today: Optional[date] = None, rng: Optional[random.Random] = None) -> str:
    """FIR/<year>/<sequence>, sequence zero-padded to four digits (1-9999)."""
    today = today or date.today()
    sequence = (rng or random).randint(1, 9999)
    return f"FIR/{today.year}/{sequence:04d}"

def _format_sections(sections: List[SectionSuggestion]) -> str:
    return "\n".join(
        f"- {s.section_code} of {s.act_name}: {s.description} (applicability {s.applicability_score}%)"
        for s in sections
    )

def _format_persons(analysis: AnalysisResult) -> str:
    if not analysis.entities.persons:
        return "- None identified"
    return "\n".join(f"- {name}" for name in analysis.entities.persons)

class FirDraftingService:
    def __init__(self, analyzer: Optional[AnalysisService] = None, rng: Optional[random.Random] = None):
        self.analyzer = analyzer or analysis_service
        self.rng = rng or random.Random()
        logger.info("FirDraftingService initialized")

    def generate(self, request: FirDraftRequest, today: Optional[date] = None) -> FirDraftResponse:
        """
        1. Analyze the description (raises InvalidInputError when blank)
        2. Number the FIR
        3. Fill the template (Deterministic)
        """
        analysis = self.analyzer.analyze(request.incident_description, request.incident_type)
        today = today or date.today()
        fir_number = generate_fir_number(today, self.rng)

        draft_text = FIR_TEMPLATE.substitute(
            fir_number=fir_number,
            police_station=request.police_station or settings.FIR_POLICE_STATION,
            report_date=today.isoformat(),
            complainant_name=request.complainant_name.strip(),
            incident_type=request.incident_type.strip() or analysis.category.value.title(),
            incident_date=request.incident_date.strip() or NOT_PROVIDED,
            incident_location=request.incident_location.strip() or NOT_PROVIDED,
            incident_description=request.incident_description.strip(),
            persons_list=_format_persons(analysis),
            legal_sections_list=_format_sections(analysis.suggested_sections),
        ).strip()

        logger.info(f"Generated {fir_number} ({len(analysis.suggested_sections)} sections)")
        return FirDraftResponse(fir_number=fir_number, draft_text=draft_text, analysis=analysis)

fir_drafting_service = FirDraftingService()
