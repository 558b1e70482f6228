import logging
import random
from typing import Optional

from app.services.analysis import extractor, recommender
from app.services.analysis.classifier import match_rule
from app.services.analysis.confidence import compute_confidence
from app.services.analysis.models import AnalysisResult, IncidentText, InvalidInputError

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Turns an incident description into structured legal guidance.

    Holds no per-call state; the only member is the random source used for
    the confidence placeholder, so one instance can serve concurrent callers.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def analyze(self, description: str, incident_type_hint: str = "") -> AnalysisResult:
        """
        Main Orchestrator

        1. Extract entities (pattern rules)
        2. Classify category (ordered keyword rules)
        3. Recommend sections / retrieve precedents for the matched offence group
        4. Compose investigative checklist
        5. Attach confidence
        """
        if description is None or not description.strip():
            logger.warning("Rejected analysis request with blank description")
            raise InvalidInputError("Enter a description before analyzing.")

        incident = IncidentText(
            description=description.strip(),
            incident_type_hint=(incident_type_hint or "").strip(),
        )

        entities = extractor.extract(incident.description)
        rule = match_rule(incident.description, incident.incident_type_hint)

        sections = recommender.recommend(rule.offence_group)
        precedents = recommender.retrieve(rule.offence_group)
        recommendations = recommender.compose(rule.offence_group)

        result = AnalysisResult(
            confidence=compute_confidence(self.rng),
            category=rule.category,
            offence_group=rule.offence_group,
            incident_type_hint=incident.incident_type_hint,
            suggested_sections=sections,
            relevant_case_laws=precedents,
            recommendations=recommendations,
            entities=entities,
        )

        logger.info(
            f"Analysis complete: category={result.category.value}, group={rule.offence_group}, "
            f"sections={len(sections)}, precedents={len(precedents)}, confidence={result.confidence:.1f}"
        )
        return result


analysis_service = AnalysisService()


def analyze(description: str, incident_type_hint: str = "") -> AnalysisResult:
    return analysis_service.analyze(description, incident_type_hint)
