import logging
import cv2
import numpy as np
import pytesseract

from app.core.config import Settings, settings as default_settings
from app.core.errors import TextRecognitionError

logger = logging.getLogger(__name__)


class TextRecognizer:
    """Runs Tesseract over a card image and returns the raw recognized text."""

    def __init__(self, settings: Settings = None):
        self.settings = settings or default_settings
        if self.settings.TESSERACT_CMD:
            pytesseract.pytesseract.tesseract_cmd = self.settings.TESSERACT_CMD

    def recognize(self, image: np.ndarray) -> str:
        """
        Recognize text in a BGR image.

        Raises:
            TextRecognitionError: if the image is empty or Tesseract fails.
        """
        if image is None or image.size == 0:
            raise TextRecognitionError()

        try:
            if image.ndim == 3:
                image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
            text = pytesseract.image_to_string(
                image,
                lang=self.settings.OCR_LANGUAGE,
                config=self.settings.tesseract_config,
            )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, RuntimeError) as e:
            logger.error(f"OCR processing error: {e}")
            raise TextRecognitionError() from e

        logger.debug("Recognized %d characters", len(text))
        return text
