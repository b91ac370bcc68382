from pydantic import BaseModel, Field


class RecognizedTextRequest(BaseModel):
    front_text: str = Field("", description="OCR text of the card front")
    back_text: str = Field("", description="OCR text of the card back")
