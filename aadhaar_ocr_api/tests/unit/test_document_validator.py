import pytest
from app.core.config import settings
from app.domain.logic.document_validator import DocumentValidator


@pytest.fixture
def validator():
    return DocumentValidator(keywords=settings.document_keywords)


@pytest.mark.parametrize("front,back", [
    ("GOVERNMENT OF INDIA\nJOHN SMITH", ""),
    ("", "Unique Identification Authority of India"),
    ("आधार - आम आदमी का अधिकार", ""),
    ("random text 1234 5678 9012", ""),
    ("", "ref 123456789012"),
])
def test_accepts_any_evidence(validator, front, back):
    assert validator.is_target_document(front, back)


def test_rejects_text_without_evidence(validator):
    assert not validator.is_target_document("Library membership card\nName: Jane Doe", "Return by 01/02/2024")


def test_evidence_reports_each_check(validator):
    found = validator.evidence("Aadhaar", "1234 5678 9012")
    assert found == {"has_keyword": True, "has_id_number": True, "has_grouped_number": True}


def test_keywords_are_injected():
    validator = DocumentValidator(keywords=("Passport",))
    assert validator.is_target_document("Republic of India Passport", "")
    assert not validator.is_target_document("Aadhaar", "")
