from fastapi import FastAPI, HTTPException
import logging
from typing import List
from app.logging_utils import configure_logging
from app.models import (
    NIKRequest,
    NIKValidationResponse,
    BirthDateResponse,
    ProvinceItem,
    CityItem,
    BatchNIKRequest,
    BatchNIKResponse
)
from app.services.nik_validator import NIKValidator
from app.services.import_validator import ImportValidator, BatchTooLargeError
from app.services import indonesia_regions
from app.utils.helpers import mask_nik, gender_label, format_date_id
from config.settings import API_TITLE, API_VERSION, LOG_LEVEL

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description="API untuk validasi NIK dan data wilayah Indonesia",
    version=API_VERSION
)

# Initialize services
nik_validator = NIKValidator()
import_validator = ImportValidator(validator=nik_validator)

@app.post("/validate-nik", response_model=NIKValidationResponse)
async def validate_nik(request: NIKRequest):
    """
    Validate an Indonesian NIK and decode region, birth date and gender

    - **nik**: 16 digit NIK
    - Returns: decoded info, or every validation error found
    """
    try:
        result = nik_validator.validate(request.nik)

        if not result.is_valid:
            return NIKValidationResponse(
                success=False,
                message="NIK tidak valid",
                errors=result.errors
            )

        return NIKValidationResponse(
            success=True,
            message="NIK valid",
            data=result.info,
            gender_label=gender_label(result.info.gender),
            date_of_birth_label=format_date_id(result.info.date_of_birth)
        )

    except Exception as e:
        logger.exception("Validation failed for NIK %s", mask_nik(request.nik))
        return NIKValidationResponse(
            success=False,
            message=f"Processing failed: {str(e)}"
        )

@app.post("/extract-birth-date", response_model=BirthDateResponse)
async def extract_birth_date(request: NIKRequest):
    """
    Extract only the birth date encoded in a NIK, e.g. to pre-fill a form

    - Does not check the province code or reject future dates
    """
    date_of_birth = nik_validator.extract_birth_date(request.nik)

    if date_of_birth is None:
        return BirthDateResponse(
            success=False,
            message="Tanggal lahir tidak dapat dibaca dari NIK"
        )

    return BirthDateResponse(
        success=True,
        message="Tanggal lahir berhasil dibaca",
        date_of_birth=date_of_birth
    )

@app.post("/validate-nik/batch", response_model=BatchNIKResponse)
async def validate_nik_batch(request: BatchNIKRequest):
    """
    Check the NIK column of imported spreadsheet rows

    - **rows**: list of row objects with an optional `nik` key
    - **full_check**: run the full NIK validation, not only the length check
    """
    try:
        report = import_validator.validate_rows(request.rows, request.full_check)
    except BatchTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))

    return BatchNIKResponse(
        success=not report.errors,
        message="Semua baris valid" if not report.errors else f"{len(report.errors)} kesalahan ditemukan",
        total_rows=report.total_rows,
        valid_rows=report.valid_rows,
        errors=report.errors
    )

@app.get("/regions/provinces", response_model=List[ProvinceItem])
async def get_provinces():
    """List all known provinces"""
    return [
        ProvinceItem(code=province.code, name=province.name)
        for province in indonesia_regions.list_provinces()
    ]

@app.get("/regions/provinces/{code}", response_model=ProvinceItem)
async def get_province(code: str):
    """Get a single province by its two digit code"""
    name = indonesia_regions.get_province_name(code)
    if name is None:
        raise HTTPException(status_code=404, detail=f"Province {code} not found")
    return ProvinceItem(code=code, name=name)

@app.get("/regions/provinces/{code}/cities", response_model=List[CityItem])
async def get_cities(code: str):
    """
    List the cities/regencies known for a province

    - The city table is a partial sample; an empty list means "unknown", not "invalid"
    """
    return [
        CityItem(code=city.code, name=city.name, province_code=city.province_code)
        for city in indonesia_regions.list_cities(code)
    ]

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "message": "API is running",
        "services": {
            "nik_validation": "active",
            "region_lookup": "active"
        }
    }

@app.get("/")
async def root():
    """API information"""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "endpoints": [
            {
                "path": "/validate-nik",
                "method": "POST",
                "description": "Validate and decode a NIK"
            },
            {
                "path": "/extract-birth-date",
                "method": "POST",
                "description": "Extract birth date from a NIK"
            },
            {
                "path": "/validate-nik/batch",
                "method": "POST",
                "description": "Check NIKs of imported rows"
            },
            {
                "path": "/regions/provinces",
                "method": "GET",
                "description": "List provinces"
            },
            {
                "path": "/regions/provinces/{code}/cities",
                "method": "GET",
                "description": "List cities of a province"
            },
            {
                "path": "/health",
                "method": "GET",
                "description": "Health check"
            },
            {
                "path": "/docs",
                "method": "GET",
                "description": "API documentation"
            }
        ]
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
