import logging
import math
import random
from typing import Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


def compute_confidence(
    rng: Optional[random.Random] = None,
    floor: Optional[float] = None,
    span: Optional[float] = None,
) -> float:
    """
    Placeholder confidence score drawn uniformly from [floor, floor + span).

    Not derived from match strength or entity counts. Defaults come from
    CONFIDENCE_FLOOR / CONFIDENCE_SPAN (80 and 20, i.e. [80, 100)).
    """
    floor = settings.CONFIDENCE_FLOOR if floor is None else floor
    span = settings.CONFIDENCE_SPAN if span is None else span
    if floor < 0 or span <= 0 or floor + span > 100:
        raise ValueError(f"Invalid confidence range: floor={floor}, span={span}")

    draw = (rng or random).random()
    confidence = draw * span + floor

    # Rounding can land exactly on the upper bound
    upper = floor + span
    if confidence >= upper:
        confidence = math.nextafter(upper, floor)

    logger.debug(f"Confidence draw={draw:.4f} -> {confidence:.2f}")
    return confidence
