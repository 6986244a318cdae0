import logging
import re
from datetime import date
from typing import Callable, List, Optional, Tuple
from app.models import Gender, NIKInfo, NIKValidationResult
from app.services.indonesia_regions import (
    get_city_name,
    get_province_name,
    is_valid_province_code
)
from app.utils.helpers import mask_nik

logger = logging.getLogger(__name__)

NIK_LENGTH = 16
FEMALE_DAY_OFFSET = 40
# 00-30 -> 2000-2030, 31-99 -> 1931-1999
YEAR_PIVOT = 30

ERR_LENGTH = "NIK harus 16 digit"
ERR_DIGITS = "NIK hanya boleh berisi angka"
ERR_PROVINCE = "Kode provinsi tidak valid"
ERR_BIRTH_DATE = "Tanggal lahir tidak valid"
ERR_BIRTH_MONTH = "Bulan lahir tidak valid"
ERR_FUTURE_DATE = "Tanggal lahir tidak boleh di masa depan"

_DIGITS = re.compile(r"[0-9]+")

def decode_day(raw_day: int) -> Tuple[int, Gender]:
    if raw_day > FEMALE_DAY_OFFSET:
        return raw_day - FEMALE_DAY_OFFSET, Gender.FEMALE
    return raw_day, Gender.MALE

def expand_year(two_digit_year: int) -> int:
    if two_digit_year <= YEAR_PIVOT:
        return 2000 + two_digit_year
    return 1900 + two_digit_year

def build_date(year: int, month: int, day: int) -> Optional[date]:
    """Return the date only if (year, month, day) exists on the calendar."""
    try:
        return date(year, month, day)
    except ValueError:
        return None

class NIKValidator:
    """
    Decodes a 16 digit NIK:

        PP CC DD dd mm yy SSSS
        |  |  |  |  |  |  +- serial, not decoded
        |  |  |  |  |  +---- birth year (two digits)
        |  |  |  |  +------- birth month
        |  |  |  +---------- birth day, +40 for women
        |  |  +------------- district
        |  +---------------- city/regency
        +------------------- province
    """

    def __init__(self, today_provider: Callable[[], date] = date.today):
        self.today_provider = today_provider

    def validate(self, nik: str) -> NIKValidationResult:
        errors: List[str] = []

        if not isinstance(nik, str) or len(nik) != NIK_LENGTH:
            return NIKValidationResult.failure([ERR_LENGTH])

        if not _DIGITS.fullmatch(nik):
            return NIKValidationResult.failure([ERR_DIGITS])

        province_code = nik[0:2]
        city_code = nik[2:4]
        district_code = nik[4:6]
        raw_day = int(nik[6:8])
        month = int(nik[8:10])
        year = int(nik[10:12])

        if not is_valid_province_code(province_code):
            errors.append(ERR_PROVINCE)

        day, gender = decode_day(raw_day)

        day_in_range = 1 <= day <= 31
        if not day_in_range:
            errors.append(ERR_BIRTH_DATE)

        month_in_range = 1 <= month <= 12
        if not month_in_range:
            errors.append(ERR_BIRTH_MONTH)

        full_year = expand_year(year)

        date_of_birth = None
        if day_in_range:
            date_of_birth = build_date(full_year, month, day)
            if date_of_birth is None:
                errors.append(ERR_BIRTH_DATE)

        if date_of_birth is not None and date_of_birth > self.today_provider():
            errors.append(ERR_FUTURE_DATE)

        if errors:
            logger.debug("NIK %s rejected: %s", mask_nik(nik), errors)
            return NIKValidationResult.failure(errors)

        info = NIKInfo(
            province=get_province_name(province_code) or f"Kode {province_code}",
            city=get_city_name(province_code, city_code) or f"Kode {province_code}.{city_code}",
            district=f"Kecamatan {district_code}",
            date_of_birth=date_of_birth,
            gender=gender
        )
        return NIKValidationResult.success(info)

    def extract_birth_date(self, nik: str) -> Optional[date]:
        """
        Best-effort birth date from a NIK. Skips the province and future
        date checks, so a date here does not mean validate() would pass.
        """
        if not isinstance(nik, str) or len(nik) != NIK_LENGTH:
            return None

        date_part = nik[6:12]
        if not _DIGITS.fullmatch(date_part):
            return None

        day, _ = decode_day(int(date_part[0:2]))
        month = int(date_part[2:4])
        full_year = expand_year(int(date_part[4:6]))

        return build_date(full_year, month, day)

_default_validator = NIKValidator()

def validate_nik(nik: str) -> NIKValidationResult:
    return _default_validator.validate(nik)

def extract_date_from_nik(nik: str) -> Optional[date]:
    return _default_validator.extract_birth_date(nik)
