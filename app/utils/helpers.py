import re
from datetime import date
from typing import Optional, Union
from app.models import Gender

MONTHS_ID = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember"
]

def sanitize_nik_input(value: Optional[str]) -> str:
    """Strip everything but digits and cut to 16 characters, as typed into a NIK field."""
    if not value:
        return ""
    return re.sub(r'[^0-9]', '', value)[:16]

def gender_label(gender: Union[Gender, str]) -> str:
    return "Laki-laki" if Gender(gender) == Gender.MALE else "Perempuan"

def format_date_id(value: Optional[date]) -> str:
    if value is None:
        return "—"
    return f"{value.day} {MONTHS_ID[value.month - 1]} {value.year}"

def mask_nik(nik: str) -> str:
    if not isinstance(nik, str) or len(nik) <= 10:
        return "*" * len(nik) if isinstance(nik, str) else ""
    return nik[:6] + "*" * (len(nik) - 10) + nik[-4:]
