from __future__ import annotations

from datetime import date, timedelta

import pytest

from app.models import Gender
from app.services.nik_validator import (
    ERR_BIRTH_DATE,
    ERR_BIRTH_MONTH,
    ERR_DIGITS,
    ERR_FUTURE_DATE,
    ERR_LENGTH,
    ERR_PROVINCE,
    NIKValidator,
    expand_year,
    extract_date_from_nik,
    validate_nik,
)


@pytest.mark.parametrize("nik", ["", "1", "327301010199000", "32730101019900011", "abcdefghijklmnopq"])
def test_wrong_length_reports_only_length_error(validator: NIKValidator, nik: str) -> None:
    result = validator.validate(nik)
    assert not result.is_valid
    assert result.errors == [ERR_LENGTH]
    assert result.info is None


@pytest.mark.parametrize("nik", ["32730101019900A1", "3273 10101990001", "327301-101990001", "327301010199000٣"])
def test_non_digit_reports_only_digit_error(validator: NIKValidator, nik: str) -> None:
    result = validator.validate(nik)
    assert result.errors == [ERR_DIGITS]


def test_non_string_input_does_not_raise(validator: NIKValidator) -> None:
    assert validator.validate(None).errors == [ERR_LENGTH]  # type: ignore[arg-type]
    assert validator.extract_birth_date(None) is None  # type: ignore[arg-type]


def test_decodes_male_nik(validator: NIKValidator) -> None:
    result = validator.validate("3273010101990001")
    assert result.is_valid
    assert result.errors == []
    assert result.info.province == "Jawa Barat"
    assert result.info.city == "Kota Bandung"
    assert result.info.district == "Kecamatan 01"
    assert result.info.date_of_birth == date(1999, 1, 1)
    assert result.info.gender == Gender.MALE


def test_decodes_female_nik_by_day_offset(validator: NIKValidator) -> None:
    result = validator.validate("3273014101990001")
    assert result.is_valid
    assert result.info.date_of_birth == date(1999, 1, 1)
    assert result.info.gender == Gender.FEMALE


def test_day_fifteen_and_fifty_five_share_day_but_not_gender(validator: NIKValidator) -> None:
    male = validator.validate("3204011501990001")
    female = validator.validate("3204015501990001")
    assert male.info.date_of_birth == female.info.date_of_birth == date(1999, 1, 15)
    assert male.info.gender == Gender.MALE
    assert female.info.gender == Gender.FEMALE
    assert male.info.city == "Bandung"


def test_day_field_fifty_five_in_sample_nik_is_female(validator: NIKValidator) -> None:
    result = validator.validate("3273015501990001")
    assert result.is_valid
    assert result.info.gender == Gender.FEMALE
    assert result.info.date_of_birth == date(1999, 1, 15)


@pytest.mark.parametrize(
    ("two_digit", "expected"),
    [(0, 2000), (30, 2030), (31, 1931), (99, 1999)],
)
def test_year_window(two_digit: int, expected: int) -> None:
    assert expand_year(two_digit) == expected


@pytest.mark.parametrize(
    ("nik", "expected"),
    [
        ("3273010101000001", date(2000, 1, 1)),
        ("3273010101300001", date(2030, 1, 1)),
        ("3273010101310001", date(1931, 1, 1)),
        ("3273010101990001", date(1999, 1, 1)),
    ],
)
def test_extract_birth_date_applies_year_window(validator: NIKValidator, nik: str, expected: date) -> None:
    assert validator.extract_birth_date(nik) == expected


def test_unknown_city_falls_back_to_code_placeholder(validator: NIKValidator) -> None:
    result = validator.validate("1101010101990001")
    assert result.is_valid
    assert result.info.province == "Aceh"
    assert result.info.city == "Kode 11.01"


def test_invalid_province_is_reported(validator: NIKValidator) -> None:
    result = validator.validate("9973010101990001")
    assert result.errors == [ERR_PROVINCE]


@pytest.mark.parametrize("nik", ["3273013104990001", "3273012902990001", "3273017102990001", "3273017104990001"])
def test_impossible_calendar_dates_are_rejected(validator: NIKValidator, nik: str) -> None:
    result = validator.validate(nik)
    assert result.errors == [ERR_BIRTH_DATE]
    assert validator.extract_birth_date(nik) is None


def test_leap_day_is_accepted(validator: NIKValidator) -> None:
    result = validator.validate("3273012902000001")
    assert result.is_valid
    assert result.info.date_of_birth == date(2000, 2, 29)


@pytest.mark.parametrize("day_field", ["00", "32", "40", "72"])
def test_out_of_range_day_reports_date_error_once(validator: NIKValidator, day_field: str) -> None:
    result = validator.validate(f"327301{day_field}01990001")
    assert result.errors == [ERR_BIRTH_DATE]


@pytest.mark.parametrize("nik", ["3273010113990001", "3273011500990001", "3273015513990001"])
def test_out_of_range_month_also_fails_calendar_check(validator: NIKValidator, nik: str) -> None:
    result = validator.validate(nik)
    assert result.errors == [ERR_BIRTH_MONTH, ERR_BIRTH_DATE]
    assert validator.extract_birth_date(nik) is None


def test_semantic_errors_accumulate_in_order(validator: NIKValidator) -> None:
    result = validator.validate("9973013213990001")
    assert result.errors == [ERR_PROVINCE, ERR_BIRTH_DATE, ERR_BIRTH_MONTH]


def test_month_overflow_errors_follow_province_error(validator: NIKValidator) -> None:
    result = validator.validate("9973011513990001")
    assert result.errors == [ERR_PROVINCE, ERR_BIRTH_MONTH, ERR_BIRTH_DATE]


def test_future_birth_date_is_rejected() -> None:
    today = date(2025, 6, 15)
    validator = NIKValidator(today_provider=lambda: today)
    tomorrow = today + timedelta(days=1)
    nik = f"327301{tomorrow:%d%m%y}0001"

    result = validator.validate(nik)
    assert result.errors == [ERR_FUTURE_DATE]
    assert validator.extract_birth_date(nik) == tomorrow


def test_birth_date_today_is_accepted() -> None:
    today = date(2025, 6, 15)
    validator = NIKValidator(today_provider=lambda: today)
    result = validator.validate(f"327301{today:%d%m%y}0001")
    assert result.is_valid
    assert result.info.date_of_birth == today


def test_future_and_province_errors_combine() -> None:
    validator = NIKValidator(today_provider=lambda: date(2025, 6, 15))
    result = validator.validate("9973010101300001")
    assert result.errors == [ERR_PROVINCE, ERR_FUTURE_DATE]


def test_extract_birth_date_ignores_unknown_province(validator: NIKValidator) -> None:
    nik = "9973010101990001"
    assert validator.extract_birth_date(nik) == date(1999, 1, 1)
    assert not validator.validate(nik).is_valid


def test_extract_birth_date_handles_malformed_input(validator: NIKValidator) -> None:
    assert validator.extract_birth_date("12345") is None
    assert validator.extract_birth_date("327301AB01990001") is None
    assert validator.extract_birth_date("3273010113990001") is None


def test_extract_birth_date_tolerates_non_digit_serial(validator: NIKValidator) -> None:
    assert validator.extract_birth_date("3273014101990XYZ") == date(1999, 1, 1)


def test_module_level_helpers_use_default_validator() -> None:
    assert validate_nik("3273010101990001").is_valid
    assert extract_date_from_nik("3273014101990001") == date(1999, 1, 1)
