from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"

class NIKInfo(BaseModel):
    province: str
    city: str
    district: str
    date_of_birth: date
    gender: Gender

class NIKValidationResult(BaseModel):
    """
    Outcome of a NIK check. Either invalid with at least one error,
    or valid with decoded info and no errors.
    """
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    info: Optional[NIKInfo] = None

    @classmethod
    def failure(cls, errors: List[str]) -> "NIKValidationResult":
        if not errors:
            raise ValueError("failure result needs at least one error")
        return cls(is_valid=False, errors=list(errors), info=None)

    @classmethod
    def success(cls, info: NIKInfo) -> "NIKValidationResult":
        return cls(is_valid=True, errors=[], info=info)

class NIKRequest(BaseModel):
    nik: str

class NIKValidationResponse(BaseModel):
    success: bool
    message: str
    errors: List[str] = Field(default_factory=list)
    data: Optional[NIKInfo] = None
    gender_label: Optional[str] = None
    date_of_birth_label: Optional[str] = None

class BirthDateResponse(BaseModel):
    success: bool
    message: str
    date_of_birth: Optional[date] = None

class ProvinceItem(BaseModel):
    code: str
    name: str

class CityItem(BaseModel):
    code: str
    name: str
    province_code: str

class BatchNIKRequest(BaseModel):
    rows: List[dict]
    full_check: bool = False

class BatchNIKResponse(BaseModel):
    success: bool
    message: str
    total_rows: int
    valid_rows: List[int] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

