from types import MappingProxyType
from typing import List, NamedTuple, Optional

class Province(NamedTuple):
    code: str
    name: str

class CityEntry(NamedTuple):
    code: str
    name: str
    province_code: str

PROVINCES = MappingProxyType({
    "11": "Aceh",
    "12": "Sumatera Utara",
    "13": "Sumatera Barat",
    "14": "Riau",
    "15": "Jambi",
    "16": "Sumatera Selatan",
    "17": "Bengkulu",
    "18": "Lampung",
    "19": "Kepulauan Bangka Belitung",
    "21": "Kepulauan Riau",
    "31": "DKI Jakarta",
    "32": "Jawa Barat",
    "33": "Jawa Tengah",
    "34": "DI Yogyakarta",
    "35": "Jawa Timur",
    "36": "Banten",
    "51": "Bali",
    "52": "Nusa Tenggara Barat",
    "53": "Nusa Tenggara Timur",
    "61": "Kalimantan Barat",
    "62": "Kalimantan Tengah",
    "63": "Kalimantan Selatan",
    "64": "Kalimantan Timur",
    "65": "Kalimantan Utara",
    "71": "Sulawesi Utara",
    "72": "Sulawesi Tengah",
    "73": "Sulawesi Selatan",
    "74": "Sulawesi Tenggara",
    "75": "Gorontalo",
    "76": "Sulawesi Barat",
    "81": "Maluku",
    "82": "Maluku Utara",
    "91": "Papua Barat",
    "94": "Papua",
})

# Sample only: a handful of regencies/cities per province. City codes are
# unique within a province, not globally.
CITIES = (
    # Jawa Barat
    CityEntry("01", "Bogor", "32"),
    CityEntry("02", "Sukabumi", "32"),
    CityEntry("03", "Cianjur", "32"),
    CityEntry("04", "Bandung", "32"),
    CityEntry("05", "Garut", "32"),
    CityEntry("06", "Tasikmalaya", "32"),
    CityEntry("07", "Ciamis", "32"),
    CityEntry("71", "Kota Bogor", "32"),
    CityEntry("72", "Kota Sukabumi", "32"),
    CityEntry("73", "Kota Bandung", "32"),
    CityEntry("74", "Kota Cirebon", "32"),
    CityEntry("75", "Kota Bekasi", "32"),
    CityEntry("76", "Kota Depok", "32"),
    CityEntry("77", "Kota Cimahi", "32"),
    CityEntry("78", "Kota Tasikmalaya", "32"),
    CityEntry("79", "Kota Banjar", "32"),

    # DKI Jakarta
    CityEntry("71", "Jakarta Selatan", "31"),
    CityEntry("72", "Jakarta Timur", "31"),
    CityEntry("73", "Jakarta Pusat", "31"),
    CityEntry("74", "Jakarta Barat", "31"),
    CityEntry("75", "Jakarta Utara", "31"),
    CityEntry("01", "Kepulauan Seribu", "31"),

    # Jawa Tengah
    CityEntry("01", "Cilacap", "33"),
    CityEntry("02", "Banyumas", "33"),
    CityEntry("03", "Purbalingga", "33"),
    CityEntry("04", "Banjarnegara", "33"),
    CityEntry("71", "Kota Magelang", "33"),
    CityEntry("72", "Kota Surakarta", "33"),
    CityEntry("73", "Kota Salatiga", "33"),
    CityEntry("74", "Kota Semarang", "33"),
    CityEntry("75", "Kota Pekalongan", "33"),
    CityEntry("76", "Kota Tegal", "33"),

    # Jawa Timur
    CityEntry("01", "Pacitan", "35"),
    CityEntry("02", "Ponorogo", "35"),
    CityEntry("03", "Trenggalek", "35"),
    CityEntry("04", "Tulungagung", "35"),
    CityEntry("71", "Kota Kediri", "35"),
    CityEntry("72", "Kota Blitar", "35"),
    CityEntry("73", "Kota Malang", "35"),
    CityEntry("74", "Kota Probolinggo", "35"),
    CityEntry("75", "Kota Pasuruan", "35"),
    CityEntry("76", "Kota Mojokerto", "35"),
    CityEntry("77", "Kota Madiun", "35"),
    CityEntry("78", "Kota Surabaya", "35"),
    CityEntry("79", "Kota Batu", "35"),

    # Bali
    CityEntry("01", "Jembrana", "51"),
    CityEntry("02", "Tabanan", "51"),
    CityEntry("03", "Badung", "51"),
    CityEntry("04", "Gianyar", "51"),
    CityEntry("71", "Kota Denpasar", "51"),
)

_CITY_INDEX = MappingProxyType({
    (city.province_code, city.code): city.name for city in CITIES
})

def get_province_name(code: str) -> Optional[str]:
    return PROVINCES.get(code)

def get_city_name(province_code: str, city_code: str) -> Optional[str]:
    """Look up a city by its (province, city) pair; never by city code alone."""
    return _CITY_INDEX.get((province_code, city_code))

def is_valid_province_code(code: str) -> bool:
    return code in PROVINCES

def is_valid_city_code(province_code: str, city_code: str) -> bool:
    return (province_code, city_code) in _CITY_INDEX

def list_provinces() -> List[Province]:
    return [Province(code, name) for code, name in sorted(PROVINCES.items())]

def list_cities(province_code: str) -> List[CityEntry]:
    return sorted(
        (city for city in CITIES if city.province_code == province_code),
        key=lambda city: city.code
    )
