"""
Category Classifier
Maps an incident description to a legal category with an ordered keyword rule table.
"""
import logging
from typing import NamedTuple, Sequence, Tuple

from app.services.analysis.models import Category

logger = logging.getLogger(__name__)


class ClassificationRule(NamedTuple):
    offence_group: str
    category: Category
    keywords: Tuple[str, ...]

    def matches(self, lowered_text: str) -> bool:
        return any(keyword in lowered_text for keyword in self.keywords)


# Evaluated top to bottom, first match wins. Theft and assault sit above the
# cybercrime group so "online theft" stays a theft.
CLASSIFICATION_RULES: Sequence[ClassificationRule] = (
    ClassificationRule("theft", Category.CRIMINAL, ("theft", "steal", "rob")),
    ClassificationRule("assault", Category.CRIMINAL, ("assault", "attack", "hurt")),
    ClassificationRule("cybercrime", Category.CYBERCRIME, ("cyber", "online", "internet")),
)

DEFAULT_RULE = ClassificationRule("criminal", Category.CRIMINAL, ())


def match_rule(text: str, type_hint: str = "") -> ClassificationRule:
    """
    Return the first rule whose keywords occur in the text, or the default rule.

    The type hint is accepted for future rules but never overrides the text:
    when no keyword group matches, the default rule fires whatever the hint says.
    """
    lowered = text.lower()
    for rule in CLASSIFICATION_RULES:
        if rule.matches(lowered):
            logger.debug(f"Rule '{rule.offence_group}' matched (hint='{type_hint}')")
            return rule

    logger.debug(f"No keyword group matched (hint='{type_hint}'), using default rule")
    return DEFAULT_RULE


def classify(text: str, type_hint: str = "") -> Category:
    return match_rule(text, type_hint).category
