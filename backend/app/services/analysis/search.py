"""
Keyword search over the legal database (sections, case laws, landmark judgments).
"""
import logging
from typing import List, Optional, Sequence, Tuple, TypeVar

from app.core.config import settings
from app.services.analysis.legal_database import CASE_LAWS, LANDMARK_JUDGMENTS, LEGAL_SECTIONS
from app.services.analysis.models import CatalogSearchResult

logger = logging.getLogger(__name__)

ALL_CATEGORIES = {"", "all"}

T = TypeVar("T")


def paginate(page: Optional[int], limit: Optional[int]) -> Tuple[int, int, int]:
    """
    Clamp paging input and return (page, limit, offset).

    page < 1 becomes 1; limit < 1 becomes SEARCH_RESULT_LIMIT; limit is capped at SEARCH_MAX_LIMIT.
    """
    page = 1 if page is None or page < 1 else page
    if limit is None or limit < 1:
        limit = settings.SEARCH_RESULT_LIMIT
    limit = min(limit, settings.SEARCH_MAX_LIMIT)
    return page, limit, (page - 1) * limit


def _contains(needle: str, *fields: str) -> bool:
    return any(needle in field.lower() for field in fields)


def _page(items: Sequence[T], offset: int, limit: int) -> List[T]:
    return [item.model_copy() for item in items[offset:offset + limit]]


def search_catalog(
    query: str,
    category: Optional[str] = None,
    limit: Optional[int] = None,
    page: Optional[int] = None,
) -> CatalogSearchResult:
    """
    Find sections, case laws and landmark judgments mentioning the query.

    An empty query matches everything. A category of None, "" or "all" disables
    category filtering; judgments carry no category and are filtered by query only.
    Totals count every match, the lists hold one page.
    """
    page, limit, offset = paginate(page, limit)
    needle = (query or "").strip().lower()
    wanted = (category or "").strip().lower()
    filter_category = wanted not in ALL_CATEGORIES

    sections = [
        s for s in LEGAL_SECTIONS
        if (not filter_category or s.category == wanted)
        and _contains(needle, s.section_code, s.act_name, s.title, s.description, *s.keywords)
    ]
    case_laws = [
        c for c in CASE_LAWS
        if (not filter_category or c.category == wanted)
        and _contains(needle, c.title, c.citation, c.summary, *c.key_points)
    ]
    judgments = sorted(
        (j for j in LANDMARK_JUDGMENTS
         if _contains(needle, j.case, j.significance, j.legal_doctrine, *j.key_principles)),
        key=lambda j: j.year,
        reverse=True,
    )

    logger.info(
        f"Legal search q='{needle}' category='{wanted or 'all'}' page={page}: "
        f"{len(sections)} sections, {len(case_laws)} case laws, {len(judgments)} judgments"
    )

    return CatalogSearchResult(
        query=query or "",
        category=wanted or None,
        page=page,
        limit=limit,
        sections=_page(sections, offset, limit),
        precedents=_page(case_laws, offset, limit),
        judgments=_page(judgments, offset, limit),
        total_sections=len(sections),
        total_precedents=len(case_laws),
        total_judgments=len(judgments),
    )
