import logging
from typing import Dict, List, Mapping, Optional, Sequence
from pydantic import BaseModel, Field
from app.services.nik_validator import ERR_LENGTH, NIKValidator, NIK_LENGTH
from config.settings import MAX_BATCH_SIZE

logger = logging.getLogger(__name__)

class BatchTooLargeError(ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"Batch of {size} rows exceeds the limit of {limit}")
        self.size = size
        self.limit = limit

class ImportReport(BaseModel):
    total_rows: int
    valid_rows: List[int] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

class ImportValidator:
    """
    Checks the NIK column of spreadsheet rows before a player import.

    Row numbers in messages are spreadsheet rows: index 0 is row 2
    because row 1 holds the column headers.
    """

    def __init__(self, validator: Optional[NIKValidator] = None, max_rows: int = MAX_BATCH_SIZE):
        self.validator = validator or NIKValidator()
        self.max_rows = max_rows

    def check_row(self, row: Mapping, index: int, full_check: bool = False) -> List[str]:
        nik = row.get('nik')
        if nik is None or nik == '':
            return []

        nik = str(nik).strip()
        row_number = index + 2

        if len(nik) != NIK_LENGTH:
            return [f"Baris {row_number}: {ERR_LENGTH}"]

        if not full_check:
            return []

        result = self.validator.validate(nik)
        return [f"Baris {row_number}: {error}" for error in result.errors]

    def validate_rows(self, rows: Sequence[Mapping], full_check: bool = False) -> ImportReport:
        if len(rows) > self.max_rows:
            raise BatchTooLargeError(len(rows), self.max_rows)

        report = ImportReport(total_rows=len(rows))
        for index, row in enumerate(rows):
            row_errors = self.check_row(row, index, full_check)
            if row_errors:
                report.errors.extend(row_errors)
            else:
                report.valid_rows.append(index)

        logger.info(
            "Checked %d rows: %d valid, %d errors",
            report.total_rows, len(report.valid_rows), len(report.errors)
        )
        return report

def validate_import_rows(rows: Sequence[Dict], full_check: bool = False) -> ImportReport:
    return ImportValidator().validate_rows(rows, full_check)
