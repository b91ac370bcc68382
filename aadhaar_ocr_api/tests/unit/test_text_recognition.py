import numpy as np
import pytest
import pytesseract
from app.core.config import Settings
from app.core.errors import TextRecognitionError
from app.services.text_recognition import TextRecognizer


@pytest.fixture
def image():
    return np.full((40, 120, 3), 255, dtype=np.uint8)


def test_recognize_returns_text(monkeypatch, image):
    calls = {}

    def fake_image_to_string(img, lang=None, config=None):
        calls['lang'] = lang
        calls['config'] = config
        return "Government of India\n"

    monkeypatch.setattr(pytesseract, 'image_to_string', fake_image_to_string)
    assert TextRecognizer().recognize(image) == "Government of India\n"
    assert calls['lang'] == "eng"
    assert calls['config'].startswith("--oem")


def test_tesseract_failure_is_wrapped(monkeypatch, image):
    def broken(img, lang=None, config=None):
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(pytesseract, 'image_to_string', broken)
    with pytest.raises(TextRecognitionError):
        TextRecognizer().recognize(image)


def test_empty_image_is_rejected():
    with pytest.raises(TextRecognitionError):
        TextRecognizer().recognize(np.zeros((0, 0, 3), dtype=np.uint8))


def test_tesseract_cmd_from_settings(monkeypatch):
    monkeypatch.setattr(pytesseract.pytesseract, 'tesseract_cmd', 'tesseract')

    class CustomSettings(Settings):
        TESSERACT_CMD = "/opt/tesseract/bin/tesseract"

    TextRecognizer(CustomSettings())
    assert pytesseract.pytesseract.tesseract_cmd == "/opt/tesseract/bin/tesseract"
