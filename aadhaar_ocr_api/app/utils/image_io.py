import numpy as np
import cv2
from fastapi import UploadFile
from typing import Optional
import logging
from PIL import Image, UnidentifiedImageError
import io

from app.core import messages
from app.core.config import settings
from app.core.errors import InvalidUploadError

logger = logging.getLogger(__name__)


def decode_upload(contents: bytes) -> Optional[np.ndarray]:
    nparr = np.frombuffer(contents, np.uint8)
    return cv2.imdecode(nparr, cv2.IMREAD_COLOR)


def load_image_with_pil_fallback(image_bytes: bytes) -> Optional[np.ndarray]:
    """
    Fallback method to load image using PIL and convert to OpenCV format.

    Args:
        image_bytes: Raw image bytes

    Returns:
        numpy.ndarray: BGR image array, or None if failed
    """
    try:
        pil_image = Image.open(io.BytesIO(image_bytes))
        if pil_image.mode != 'RGB':
            pil_image = pil_image.convert('RGB')
        image_array = np.array(pil_image)
        return cv2.cvtColor(image_array, cv2.COLOR_RGB2BGR)

    except (UnidentifiedImageError, OSError) as e:
        logger.error(f"PIL fallback failed: {str(e)}")
        return None


def validate_upload(file: Optional[UploadFile]) -> UploadFile:
    """Reject missing uploads and content types other than JPG/JPEG/PNG."""
    if file is None:
        raise InvalidUploadError(messages.BOTH_IMAGES_REQUIRED)
    if file.content_type not in settings.ALLOWED_CONTENT_TYPES:
        logger.error(f"Unsupported image format: {file.content_type}")
        raise InvalidUploadError(messages.INVALID_FILE_TYPE)
    return file


async def load_image_from_upload(file: UploadFile) -> np.ndarray:
    """
    Load and convert uploaded file to OpenCV BGR image array.

    Args:
        file: FastAPI UploadFile object

    Returns:
        numpy.ndarray: BGR image array for OpenCV

    Raises:
        InvalidUploadError: wrong type, too large, empty or undecodable
    """
    validate_upload(file)

    contents = await file.read()
    if not contents:
        logger.error("Empty file received")
        raise InvalidUploadError(messages.IMAGE_DECODE_FAILED)
    if len(contents) > settings.MAX_FILE_SIZE:
        raise InvalidUploadError(messages.FILE_TOO_LARGE)

    image = decode_upload(contents)
    if image is None:
        logger.error("Failed to decode image with OpenCV, trying PIL fallback")
        image = load_image_with_pil_fallback(contents)

    # Reset file pointer for potential future reads
    await file.seek(0)

    if image is None:
        logger.error("Failed to load image with both OpenCV and PIL")
        raise InvalidUploadError(messages.IMAGE_DECODE_FAILED)

    logger.info(f"Successfully loaded image: {image.shape}")
    return image
