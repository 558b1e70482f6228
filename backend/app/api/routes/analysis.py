"""
Incident Analysis API Routes
"""
from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from app.services.analysis.models import AnalysisRequest, AnalysisResult, InvalidInputError, SuggestionResponse
from app.services.analysis.service import analysis_service
from app.services.analysis.suggestions import suggest_incidents

router = APIRouter()


@router.post("", response_model=AnalysisResult)
async def analyze_incident(request: AnalysisRequest):
    """
    Analyze an incident description.

    Flow:
    1. Extract entities (pattern rules)
    2. Classify category (ordered keyword rules)
    3. Look up sections, precedents and checklist for the offence group
    4. Attach confidence
    """
    try:
        return analysis_service.analyze(request.description, request.incident_type_hint)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")


@router.get("/suggestions", response_model=SuggestionResponse)
async def incident_suggestions(
    q: str = Query("", description="Partial incident type typed by the officer"),
    limit: Optional[int] = Query(None, ge=1, le=20, description="Maximum number of suggestions (defaults to SUGGESTION_LIMIT)")
):
    return SuggestionResponse(query=q, suggestions=suggest_incidents(q, limit))
