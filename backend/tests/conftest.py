import random
import pytest
import sys
from pathlib import Path
from httpx import ASGITransport, AsyncClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.main import app
from app.services.analysis.service import AnalysisService

SAMPLE_DESCRIPTION = "Rajesh Kumar reported a theft at Main Street on 15 January 2024"

@pytest.fixture
async def client():
    """Create test client for FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

@pytest.fixture
def sample_description():
    return SAMPLE_DESCRIPTION

@pytest.fixture
def seeded_service():
    """Analysis service with a fixed random source."""
    return AnalysisService(rng=random.Random(42))
