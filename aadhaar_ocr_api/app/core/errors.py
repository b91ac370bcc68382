"""
Exception types for Aadhaar text extraction.

Only the gates in the orchestrator, the OCR provider and the upload helpers
raise these. A field that cannot be resolved is left empty instead.
"""

from app.core import messages


class AadhaarExtractionError(Exception):
    """Base exception for extraction failures"""

    status_code = 500
    default_message = messages.SERVER_ERROR

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAadhaarCardError(AadhaarExtractionError):
    """
    Raised when the recognized text carries no evidence of an Aadhaar card:
    no issuing-authority keyword and no 12-digit number.
    """

    status_code = 400
    default_message = messages.NOT_AADHAAR_CARD


class InsufficientDataError(AadhaarExtractionError):
    """
    Raised when the text passed validation but none of the minimum field
    combinations (ID number, name with date of birth, address) was resolved.
    """

    status_code = 422
    default_message = messages.INSUFFICIENT_DATA


class TextRecognitionError(AadhaarExtractionError):
    """Raised when the OCR engine fails before any text reaches extraction."""

    status_code = 502
    default_message = messages.OCR_FAILED


class InvalidUploadError(AadhaarExtractionError):
    """Raised for missing, oversized, mistyped or undecodable uploads."""

    status_code = 400
    default_message = messages.IMAGE_DECODE_FAILED
