from datetime import date

import pytest

from app.services.nik_validator import NIKValidator

FIXED_TODAY = date(2025, 6, 15)


@pytest.fixture
def validator() -> NIKValidator:
    return NIKValidator(today_provider=lambda: FIXED_TODAY)
