from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class OcrResponse(BaseModel):
    success: bool
    data: str


class ExtractionResponse(BaseModel):
    success: bool
    message: str
    state: str
    data: Optional[Dict[str, Any]] = None
    fields: Dict[str, str] = Field(default_factory=dict)
    labeled_text: Optional[str] = None
    errors: List[str] = Field(default_factory=list)
    evidence: Optional[Dict[str, bool]] = None
