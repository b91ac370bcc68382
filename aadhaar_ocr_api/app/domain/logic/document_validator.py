import logging
from typing import Dict, Iterable

from app.utils.numeric_tokens import ID_NUMBER_PATTERN, GROUPED_ID_NUMBER_PATTERN

logger = logging.getLogger(__name__)


class DocumentValidator:
    """
    Decides whether recognized text plausibly comes from an Aadhaar card.

    Any single piece of evidence is enough: a known keyword, a 12-digit number
    or a space-grouped 12-digit number. OCR often misses the printed headers,
    so the number alone has to be sufficient.
    """

    def __init__(self, keywords: Iterable[str]):
        self.keywords = tuple(keywords)
        self._lowered_keywords = tuple(kw.lower() for kw in self.keywords)

    def evidence(self, front_text: str, back_text: str) -> Dict[str, bool]:
        combined = f"{front_text or ''} {back_text or ''}"
        lowered = combined.lower()
        return {
            "has_keyword": any(kw in lowered for kw in self._lowered_keywords),
            "has_id_number": bool(ID_NUMBER_PATTERN.search(combined)),
            "has_grouped_number": bool(GROUPED_ID_NUMBER_PATTERN.search(combined)),
        }

    def is_target_document(self, front_text: str, back_text: str) -> bool:
        found = self.evidence(front_text, back_text)
        logger.debug("Document evidence: %s", found)
        return any(found.values())
