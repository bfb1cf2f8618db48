"""Lookup tables used to assign ISO codes to scraped country headers."""

from typing import Dict

# Currency -> ISO country code, used when the country name is not recognised.
CURRENCY_TO_ISO: Dict[str, str] = {
    "USD": "US", "CAD": "CA", "MXN": "MX", "BRL": "BR", "CLP": "CL",
    "COP": "CO", "PEN": "PE", "EUR": "EU", "GBP": "GB", "CHF": "CH",
    "SEK": "SE", "NOK": "NO", "DKK": "DK", "PLN": "PL", "CZK": "CZ",
    "HUF": "HU", "RON": "RO", "BGN": "BG", "HRK": "HR", "RUB": "RU",
    "TRY": "TR", "ILS": "IL", "AED": "AE", "SAR": "SA", "ZAR": "ZA",
    "EGP": "EG", "NGN": "NG", "KES": "KE", "AUD": "AU", "NZD": "NZ",
    "JPY": "JP", "CNY": "CN", "HKD": "HK", "TWD": "TW", "KRW": "KR",
    "SGD": "SG", "MYR": "MY", "THB": "TH", "IDR": "ID", "PHP": "PH",
    "VND": "VN", "INR": "IN", "PKR": "PK", "BDT": "BD", "LKR": "LK",
}

COUNTRY_TO_ISO: Dict[str, str] = {
    "United States": "US", "Canada": "CA", "Mexico": "MX", "Brazil": "BR",
    "Chile": "CL", "Colombia": "CO", "Peru": "PE", "Argentina": "AR",
    "Bahamas": "BS", "Barbados": "BB", "Suriname": "SR",
    "United Kingdom": "GB", "Germany": "DE", "France": "FR", "Italy": "IT",
    "Spain": "ES", "Netherlands": "NL", "Belgium": "BE", "Austria": "AT",
    "Switzerland": "CH", "Sweden": "SE", "Norway": "NO", "Denmark": "DK",
    "Finland": "FI", "Ireland": "IE", "Portugal": "PT", "Poland": "PL",
    "Czech Republic": "CZ", "Czechia": "CZ", "Hungary": "HU", "Romania": "RO",
    "Bulgaria": "BG", "Croatia": "HR", "Greece": "GR", "Slovakia": "SK",
    "Slovenia": "SI", "Estonia": "EE", "Latvia": "LV", "Lithuania": "LT",
    "Luxembourg": "LU", "Malta": "MT", "Cyprus": "CY", "Iceland": "IS",
    "Russia": "RU", "Ukraine": "UA", "Turkey": "TR", "Türkiye": "TR",
    "Israel": "IL", "United Arab Emirates": "AE", "Saudi Arabia": "SA",
    "Qatar": "QA", "Kuwait": "KW", "Bahrain": "BH", "Oman": "OM",
    "South Africa": "ZA", "Egypt": "EG", "Nigeria": "NG", "Kenya": "KE",
    "Morocco": "MA", "Tunisia": "TN", "Algeria": "DZ",
    "Australia": "AU", "New Zealand": "NZ", "Japan": "JP",
    "China": "CN", "China mainland": "CN", "Hong Kong": "HK", "Taiwan": "TW",
    "South Korea": "KR", "Korea": "KR", "Singapore": "SG", "Malaysia": "MY",
    "Thailand": "TH", "Indonesia": "ID", "Philippines": "PH", "Vietnam": "VN",
    "India": "IN", "Pakistan": "PK", "Bangladesh": "BD", "Sri Lanka": "LK",
    "Nepal": "NP", "Cambodia": "KH", "Laos": "LA", "Myanmar": "MM",
}


def resolve_iso(country: str, currency: str) -> str:
    """Country name first, then currency, then the first two letters of the currency."""
    iso = COUNTRY_TO_ISO.get((country or "").strip())
    if iso:
        return iso
    cur = (currency or "").strip().upper()
    return CURRENCY_TO_ISO.get(cur) or cur[:2]
