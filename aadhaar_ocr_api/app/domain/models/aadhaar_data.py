from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List
import re


class RecognizedText(BaseModel):
    """OCR output for both sides of the card."""

    model_config = ConfigDict(frozen=True)

    front: str = ""
    back: str = ""


class AadhaarData(BaseModel):

    """Fields extracted from an Aadhaar card. Unresolved fields are empty strings."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "idNumber": "1234 5678 9012",
                "name": "JOHN SMITH",
                "dateOfBirth": "01/02/1990",
                "gender": "Male",
                "address": "S/O: Ravi Kumar, Malappuram, Kerala, 676505",
                "postalCode": "676505",
            }
        },
    )

    id_number: str = Field("", alias="idNumber", description="12-digit Aadhaar number (XXXX XXXX XXXX)")
    name: str = Field("", alias="name", description="Card holder name")
    date_of_birth: str = Field("", alias="dateOfBirth", description="Date of birth as printed (DD/MM/YYYY)")
    gender: str = Field("", alias="gender", description="Male or Female, as printed")
    address: str = Field("", alias="address", description="Reconstructed postal address")
    postal_code: str = Field("", alias="postalCode", description="6-digit PIN code")

    def has_minimum_data(self) -> bool:
        """An ID number, a name with a date of birth, or an address."""
        return bool(
            self.id_number
            or (self.name and self.date_of_birth)
            or self.address
        )

    @staticmethod
    def label_for(key: str) -> str:
        """'dateOfBirth' -> 'Date Of Birth'."""
        spaced = re.sub(r'([A-Z])', r' \1', key)
        return spaced[:1].upper() + spaced[1:]

    def to_labeled_lines(self) -> List[str]:
        return [
            f"{self.label_for(key)}: {value}"
            for key, value in self.model_dump(by_alias=True).items()
        ]

    def to_labeled_text(self) -> str:
        return "\n".join(self.to_labeled_lines())

    def to_readable_format(self) -> Dict[str, str]:
        """Label -> value mapping in field order."""
        return {
            self.label_for(key): value
            for key, value in self.model_dump(by_alias=True).items()
        }
