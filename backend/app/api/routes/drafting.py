from fastapi import APIRouter, HTTPException
from typing import Any

from app.services.drafting.service import fir_drafting_service
from app.services.analysis.models import InvalidInputError
from app.services.drafting.models import FirDraftRequest, FirDraftResponse

router = APIRouter()

@router.post("/fir", response_model=FirDraftResponse)
async def generate_fir(request: FirDraftRequest) -> Any:
    """
    Generate a First Information Report draft from an incident description.

    Flow:
    1. Analyze Incident (rules)
    2. Assign FIR Number
    3. Fill Template (Deterministic)
    """
    try:
        return fir_drafting_service.generate(request)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")
