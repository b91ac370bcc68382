"""User-facing messages returned by the API."""

OCR_COMPLETE = "OCR processing completed successfully"
EXTRACTION_REJECTED = "Aadhaar extraction failed"

NOT_AADHAAR_CARD = "Uploaded image is not a valid Aadhaar card"
INSUFFICIENT_DATA = "Could not extract sufficient data from the Aadhaar card"
OCR_FAILED = "Failed to process image with OCR"

BOTH_IMAGES_REQUIRED = "Both front and back images are required"
INVALID_FILE_TYPE = "Only JPG, JPEG and PNG files are allowed"
FILE_TOO_LARGE = "File size exceeds the limit (5MB)"
IMAGE_DECODE_FAILED = "Could not process uploaded image"
SERVER_ERROR = "Internal server error"
