from typing import List
from pydantic import model_validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # ============================================
    # INCIDENT ANALYSIS
    # ============================================

    # Confidence is drawn from [FLOOR, FLOOR + SPAN)
    CONFIDENCE_FLOOR: float = 80.0
    CONFIDENCE_SPAN: float = 20.0

    # Incident-type autocomplete
    SUGGESTION_LIMIT: int = 5

    # Legal catalog search (page size, capped at SEARCH_MAX_LIMIT)
    SEARCH_RESULT_LIMIT: int = 10
    SEARCH_MAX_LIMIT: int = 100

    # FIR Drafting
    FIR_POLICE_STATION: str = "Not specified"

    @model_validator(mode="after")
    def check_confidence_range(self):
        floor, span = self.CONFIDENCE_FLOOR, self.CONFIDENCE_SPAN
        if floor < 0 or span <= 0 or floor + span > 100:
            raise ValueError(f"Invalid confidence range: floor={floor}, span={span}")
        return self

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
