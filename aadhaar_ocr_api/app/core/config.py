import os
from dotenv import load_dotenv
from typing import Dict, Any, Tuple

load_dotenv()


def _tokens_from_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """Read a comma-separated token list from the environment, else the default."""
    raw = os.getenv(name)
    if not raw:
        return default
    return tuple(token.strip() for token in raw.split(",") if token.strip())


class Settings:
    PROJECT_NAME: str = "Aadhaar OCR Extraction API"
    TESSERACT_CMD: str = os.getenv("TESSERACT_CMD", "")
    OCR_LANGUAGE: str = os.getenv("OCR_LANGUAGE", "eng")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Browser origins allowed to call the API (comma-separated)
    FRONT_END: Tuple[str, ...] = _tokens_from_env("FRONT_END", ("http://localhost:5173",))

    # Upload limits
    MAX_FILE_SIZE: int = 5 * 1024 * 1024  # 5MB
    ALLOWED_CONTENT_TYPES: Tuple[str, ...] = ("image/jpeg", "image/jpg", "image/png")

    ocr_config: Dict[str, Any] = {
        'oem': 3,
        'psm': 3,
    }

    # Evidence that recognized text belongs to an Aadhaar card (partial, case-insensitive)
    document_keywords: Tuple[str, ...] = _tokens_from_env("AADHAAR_KEYWORDS", (
        'Unique Identif',
        'Authority of In',
        'Aadhaar',
        'आधार',
        'VID',
        'Government of In',
        'UID',
    ))

    # Known locality names used when reassembling the address
    gazetteer: Tuple[str, ...] = _tokens_from_env("AADHAAR_GAZETTEER", (
        'Puthoopadam',
        'Cherukavu',
        'Avikkarapadi',
        'Malappuram',
        'Kerala',
    ))

    # Lines containing any of these are never part of the address
    address_boilerplate: Tuple[str, ...] = _tokens_from_env("AADHAAR_ADDRESS_BOILERPLATE", (
        'Unique Identification',
        'Uidal',
        'www',
    ))

    @property
    def tesseract_config(self) -> str:
        return f"--oem {self.ocr_config['oem']} --psm {self.ocr_config['psm']}"


settings = Settings()
