import numpy as np
import pytest
from app.core import messages
from app.core.errors import NotAadhaarCardError, InsufficientDataError, TextRecognitionError
from app.services.orchestrator import AadhaarExtractionOrchestrator, ExtractionState

FRONT = "Government of India\nJOHN SMITH\nDOB: 01/02/1990\nMale\n1234 5678 9012"
BACK = "Address: S/O Ravi Kumar, 12 Temple Road, Malappuram, Kerala 676505"


class FakeRecognizer:
    def __init__(self, *texts, error=None):
        self.texts = list(texts)
        self.error = error

    def recognize(self, image):
        if self.error:
            raise self.error
        return self.texts.pop(0)


@pytest.fixture
def orchestrator():
    return AadhaarExtractionOrchestrator()


@pytest.fixture
def patch_image_loading(monkeypatch):
    async def fake_load(file):
        return np.zeros((10, 10, 3), dtype=np.uint8)
    monkeypatch.setattr('app.services.orchestrator.load_image_from_upload', fake_load)
    yield


def test_extract_all_fields(orchestrator):
    data = orchestrator.extract(FRONT, BACK)
    assert data.id_number == "1234 5678 9012"
    assert data.name == "JOHN SMITH"
    assert data.date_of_birth == "01/02/1990"
    assert data.gender == "Male"
    assert data.address == "S/O: Ravi Kumar, Malappuram, Kerala, 676505"
    assert data.postal_code == "676505"


def test_extract_labeled(orchestrator):
    assert orchestrator.extract_labeled(FRONT, BACK) == (
        "Id Number: 1234 5678 9012\n"
        "Name: JOHN SMITH\n"
        "Date Of Birth: 01/02/1990\n"
        "Gender: Male\n"
        "Address: S/O: Ravi Kumar, Malappuram, Kerala, 676505\n"
        "Postal Code: 676505"
    )


def test_rejects_non_aadhaar_text(orchestrator):
    with pytest.raises(NotAadhaarCardError) as exc:
        orchestrator.extract("Library membership card", "Return by 01/02/2024")
    assert exc.value.message == messages.NOT_AADHAAR_CARD


def test_rejects_when_no_minimum_data(orchestrator):
    with pytest.raises(InsufficientDataError):
        orchestrator.extract("Government of India", "")


def test_name_without_date_of_birth_is_insufficient(orchestrator):
    with pytest.raises(InsufficientDataError):
        orchestrator.extract("Aadhaar\nName: Priya Sharma", "")


def test_name_with_date_of_birth_is_enough(orchestrator):
    data = orchestrator.extract("Aadhaar\nPriya Sharma DOB: 03/04/1995", "Unique Identification Authority of India")
    assert data.name == "Priya Sharma"
    assert data.date_of_birth == "03/04/1995"
    assert data.id_number == ""
    assert data.address == ""


def test_run_success(orchestrator):
    result = orchestrator.run(FRONT, BACK, include_debug=True)
    assert result['is_valid'] is True
    assert result['state'] == ExtractionState.COMPLETE.value
    assert result['errors'] == []
    assert result['data']['idNumber'] == "1234 5678 9012"
    assert result['fields']['Postal Code'] == "676505"
    assert result['evidence']['has_keyword'] is True


def test_run_reports_rejections(orchestrator):
    result = orchestrator.run("nothing here", "")
    assert result['is_valid'] is False
    assert result['state'] == ExtractionState.REJECTED_NOT_DOCUMENT.value
    assert result['errors'] == [messages.NOT_AADHAAR_CARD]
    assert 'evidence' not in result

    result = orchestrator.run("UIDAI", "")
    assert result['state'] == ExtractionState.REJECTED_INSUFFICIENT_DATA.value
    assert result['errors'] == [messages.INSUFFICIENT_DATA]
    assert result['data'] is None


@pytest.mark.asyncio
async def test_process_aadhaar_images(patch_image_loading):
    orchestrator = AadhaarExtractionOrchestrator(recognizer=FakeRecognizer(FRONT, BACK))
    formatted = await orchestrator.process_aadhaar_images(object(), object())
    assert formatted.splitlines()[0] == "Id Number: 1234 5678 9012"
    assert formatted.splitlines()[-1] == "Postal Code: 676505"


@pytest.mark.asyncio
async def test_recognition_failure_is_surfaced(patch_image_loading):
    orchestrator = AadhaarExtractionOrchestrator(recognizer=FakeRecognizer(error=TextRecognitionError()))
    with pytest.raises(TextRecognitionError):
        await orchestrator.process_aadhaar_images(object(), object())
