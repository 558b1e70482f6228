"""
Legal Database API Routes
"""
from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from app.services.analysis.models import CatalogSearchResult
from app.services.analysis.search import search_catalog

router = APIRouter()


@router.get("/search", response_model=CatalogSearchResult)
async def search_laws(
    q: str = Query("", description="Search text"),
    category: Optional[str] = Query(None, description="e.g. criminal, cybercrime, crimes_against_women, or all"),
    page: int = Query(1, description="Page number, values below 1 are treated as 1"),
    limit: Optional[int] = Query(None, description="Results per list (defaults to SEARCH_RESULT_LIMIT, capped at SEARCH_MAX_LIMIT)")
):
    """
    Search statutory sections, case laws and landmark judgments
    """
    try:
        return search_catalog(q, category, limit, page)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Search failed: {str(e)}")
