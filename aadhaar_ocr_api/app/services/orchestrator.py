from enum import Enum
from typing import Dict, Any, Tuple
from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
import logging

from app.core.config import Settings, settings as default_settings
from app.core.errors import AadhaarExtractionError, NotAadhaarCardError, InsufficientDataError
from app.domain.logic.document_validator import DocumentValidator
from app.domain.logic.address_reconstructor import AddressReconstructor
from app.domain.logic.field_resolvers import (
    resolve_id_number,
    resolve_name,
    resolve_date_of_birth,
    resolve_gender,
    resolve_postal_code,
)
from app.domain.models.aadhaar_data import AadhaarData, RecognizedText
from app.services.text_recognition import TextRecognizer
from app.utils.image_io import load_image_from_upload

logger = logging.getLogger(__name__)


class ExtractionState(str, Enum):
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    COMPLETE = "complete"
    REJECTED_NOT_DOCUMENT = "rejected_not_document"
    REJECTED_INSUFFICIENT_DATA = "rejected_insufficient_data"


class AadhaarExtractionOrchestrator:
    """Orchestrates validation and field extraction for one pair of recognized texts."""

    def __init__(self, settings: Settings = None, recognizer: TextRecognizer = None):
        self.settings = settings or default_settings
        self.validator = DocumentValidator(keywords=self.settings.document_keywords)
        self.address_reconstructor = AddressReconstructor(
            gazetteer=self.settings.gazetteer,
            boilerplate=self.settings.address_boilerplate,
        )
        self._recognizer = recognizer

    @property
    def recognizer(self) -> TextRecognizer:
        if self._recognizer is None:
            self._recognizer = TextRecognizer(self.settings)
        return self._recognizer

    def extract(self, front_text: str, back_text: str) -> AadhaarData:
        """
        Validate the recognized text and resolve every field.

        Raises:
            NotAadhaarCardError: no keyword or ID-number evidence in either side.
            InsufficientDataError: no ID number, no name with DOB and no address.
        """
        text = RecognizedText(front=front_text or "", back=back_text or "")

        logger.info("State %s: checking document evidence", ExtractionState.VALIDATING.value)
        if not self.validator.is_target_document(text.front, text.back):
            logger.warning("Validation failed - not a valid Aadhaar card")
            raise NotAadhaarCardError()

        logger.info("State %s: resolving fields", ExtractionState.EXTRACTING.value)
        data = AadhaarData(
            id_number=resolve_id_number(text.front),
            name=resolve_name(text.front),
            date_of_birth=resolve_date_of_birth(text.front),
            gender=resolve_gender(text.front),
            address=self.address_reconstructor.reconstruct(text.back),
            postal_code=resolve_postal_code(text.back),
        )
        logger.debug("Extracted fields: %s", data.model_dump(by_alias=True))

        if not data.has_minimum_data():
            logger.warning("Validation failed - couldn't extract minimum required data")
            raise InsufficientDataError()

        logger.info("State %s: Aadhaar extraction completed successfully", ExtractionState.COMPLETE.value)
        return data

    def extract_labeled(self, front_text: str, back_text: str) -> str:
        """Extract and format as newline-joined 'Label: value' lines."""
        return self.extract(front_text, back_text).to_labeled_text()

    def run(self, front_text: str, back_text: str, include_debug: bool = False) -> Dict[str, Any]:
        """
        Complete extraction workflow that reports rejections instead of raising.

        Returns:
            Dictionary with is_valid, state, errors and, on success, the
            extracted data and its labeled text.
        """
        result = {
            'is_valid': False,
            'state': ExtractionState.VALIDATING.value,
            'errors': [],
            'data': None,
            'fields': {},
            'labeled_text': None,
        }
        if include_debug:
            result['evidence'] = self.validator.evidence(front_text or "", back_text or "")

        try:
            data = self.extract(front_text, back_text)
        except NotAadhaarCardError as e:
            result['state'] = ExtractionState.REJECTED_NOT_DOCUMENT.value
            result['errors'].append(e.message)
            return result
        except InsufficientDataError as e:
            result['state'] = ExtractionState.REJECTED_INSUFFICIENT_DATA.value
            result['errors'].append(e.message)
            return result

        result['state'] = ExtractionState.COMPLETE.value
        result['is_valid'] = True
        result['data'] = data.model_dump(by_alias=True)
        result['fields'] = data.to_readable_format()
        result['labeled_text'] = data.to_labeled_text()
        return result

    async def recognize_uploads(self, front: UploadFile, back: UploadFile) -> Tuple[str, str]:
        """Decode both uploads and run OCR on each; blocking work runs in the threadpool."""
        front_image = await load_image_from_upload(front)
        back_image = await load_image_from_upload(back)

        front_text = await run_in_threadpool(self.recognizer.recognize, front_image)
        back_text = await run_in_threadpool(self.recognizer.recognize, back_image)
        return front_text, back_text

    async def process_aadhaar_images(self, front: UploadFile, back: UploadFile) -> str:
        """
        OCR both sides of the card and return the labeled field text.

        Raises:
            AadhaarExtractionError: any upload, recognition or extraction rejection.
        """
        try:
            front_text, back_text = await self.recognize_uploads(front, back)
            return self.extract_labeled(front_text, back_text)
        except AadhaarExtractionError as e:
            logger.error(f"Aadhaar processing error: {e.message}")
            raise
