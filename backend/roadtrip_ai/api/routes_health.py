from fastapi import APIRouter

from roadtrip_ai.core.config import settings
from roadtrip_ai.query.vocabulary import VOCABULARY_VERSION

router = APIRouter()


@router.get("/health")
def healthcheck() -> dict:
    return {
        "status": "ok",
        "service": settings.app_name,
        "environment": settings.environment,
        "vocabulary": VOCABULARY_VERSION,
    }
