from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
import logging

from app.api.v1.deps import get_orchestrator
from app.core import messages
from app.schemas.request import RecognizedTextRequest
from app.schemas.response import ExtractionResponse
from app.services.orchestrator import AadhaarExtractionOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/extract", response_model=ExtractionResponse)
async def extract_from_text(
    payload: RecognizedTextRequest,
    include_debug: bool = Query(False, description="Include document evidence in response"),
    orchestrator: AadhaarExtractionOrchestrator = Depends(get_orchestrator),
):
    """
    Extract Aadhaar fields from text that was already recognized.

    Args:
        payload: front and back OCR text
        include_debug: Whether to include which document evidence was found

    Returns:
        Extraction result with the structured record on success, or the
        rejection reason with status 422.
    """
    result = orchestrator.run(
        payload.front_text,
        payload.back_text,
        include_debug=include_debug,
    )

    body = ExtractionResponse(
        success=result['is_valid'],
        message=messages.OCR_COMPLETE if result['is_valid'] else messages.EXTRACTION_REJECTED,
        state=result['state'],
        data=result['data'],
        fields=result['fields'],
        labeled_text=result['labeled_text'],
        errors=result['errors'],
        evidence=result.get('evidence'),
    )
    if not result['is_valid']:
        logger.info("Extraction rejected: %s", result['errors'])
    return JSONResponse(
        status_code=200 if result['is_valid'] else 422,
        content=body.model_dump(),
    )
