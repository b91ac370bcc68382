from fastapi import APIRouter, UploadFile, File, HTTPException, Depends
import logging

from app.api.v1.deps import get_orchestrator
from app.core.errors import AadhaarExtractionError
from app.schemas.response import OcrResponse
from app.services.orchestrator import AadhaarExtractionOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/process-aadhaar", response_model=OcrResponse)
async def process_aadhaar(
    front: UploadFile = File(None),
    back: UploadFile = File(None),
    orchestrator: AadhaarExtractionOrchestrator = Depends(get_orchestrator),
):
    """
    Endpoint to OCR the front and back of an Aadhaar card and extract its fields.

    Parameters:
    - front: image of the card front (JPG/JPEG/PNG, max 5MB)
    - back: image of the card back (JPG/JPEG/PNG, max 5MB)

    Returns:
    - JSON with the extracted fields as newline-joined "Label: value" lines
    - 400 if an image is missing or invalid, or the card is not an Aadhaar card
    - 422 if too few fields could be extracted
    - 502 if OCR fails
    """
    try:
        formatted = await orchestrator.process_aadhaar_images(front, back)
        return {"success": True, "data": formatted}

    except AadhaarExtractionError:
        raise

    except Exception as e:
        logger.exception("Unexpected error while processing Aadhaar images")
        raise HTTPException(status_code=500, detail=f"Internal error: {e}")
