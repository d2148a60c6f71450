"""
Request and response models for the validation API
JSON field names follow the camelCase wire format
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .verhoeff import FoldStep


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ValidationRequest(_Model):
    aadhaar_number: Optional[str] = Field(default=None, alias="aadhaarNumber")


class ValidationResponse(_Model):
    is_valid: bool = Field(alias="isValid")
    message: str
    # None when the input was not 12 digits
    checksum: Optional[int] = None


class CheckDigitRequest(_Model):
    prefix: Optional[str] = None


class CheckDigitResponse(_Model):
    prefix: str
    check_digit: int = Field(alias="checkDigit")
    aadhaar_number: str = Field(alias="aadhaarNumber")


class FoldStepModel(_Model):
    position: int
    digit: int
    permutation_row: int = Field(alias="permutationRow")
    permuted: int
    before: int
    after: int

    @classmethod
    def from_step(cls, step: FoldStep) -> "FoldStepModel":
        return cls(**step._asdict())


class TraceResponse(_Model):
    aadhaar_number: str = Field(alias="aadhaarNumber")
    steps: List[FoldStepModel]
    checksum: int
    is_valid: bool = Field(alias="isValid")
