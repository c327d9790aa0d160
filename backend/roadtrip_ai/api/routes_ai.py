import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from roadtrip_ai.api import get_advisor_service
from roadtrip_ai.core.defaults import ASK_FAILED_MESSAGE, ERROR_TYPE
from roadtrip_ai.models.schemas import AskRequest
from roadtrip_ai.services.advisor_service import AdvisorService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ask")
def ask(
    payload: AskRequest,
    service: AdvisorService = Depends(get_advisor_service),
) -> Dict[str, Any]:
    try:
        return service.generate_roadtrip_advisor(payload.to_domain())
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure while answering %r", payload.prompt[:80])
        return {"type": ERROR_TYPE, "message": ASK_FAILED_MESSAGE, "details": str(exc)}
