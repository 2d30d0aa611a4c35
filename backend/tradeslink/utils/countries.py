"""Country names and ISO codes for the markets the platform serves."""

COUNTRIES: dict[str, str] = {
    "DE": "Germany",
    "AT": "Austria",
    "BE": "Belgium",
    "BG": "Bulgaria",
    "HR": "Croatia",
    "CY": "Cyprus",
    "CZ": "Czechia",
    "DK": "Denmark",
    "EE": "Estonia",
    "FI": "Finland",
    "FR": "France",
    "GR": "Greece",
    "HU": "Hungary",
    "IE": "Ireland",
    "IT": "Italy",
    "LV": "Latvia",
    "LT": "Lithuania",
    "LU": "Luxembourg",
    "MT": "Malta",
    "NL": "Netherlands",
    "PL": "Poland",
    "PT": "Portugal",
    "RO": "Romania",
    "SK": "Slovakia",
    "SI": "Slovenia",
    "ES": "Spain",
    "SE": "Sweden",
    "CH": "Switzerland",
    "RU": "Russia",
    "US": "United States",
}

_ALIASES = {
    "czech republic": "CZ",
    "holland": "NL",
    "the netherlands": "NL",
    "usa": "US",
    "united states of america": "US",
}

# Names used by the Russian-language client
LOCAL_NAMES: dict[str, str] = {
    "DE": "Германия",
    "AT": "Австрия",
    "BE": "Бельгия",
    "BG": "Болгария",
    "HR": "Хорватия",
    "CY": "Кипр",
    "CZ": "Чехия",
    "DK": "Дания",
    "EE": "Эстония",
    "FI": "Финляндия",
    "FR": "Франция",
    "GR": "Греция",
    "HU": "Венгрия",
    "IE": "Ирландия",
    "IT": "Италия",
    "LV": "Латвия",
    "LT": "Литва",
    "LU": "Люксембург",
    "MT": "Мальта",
    "NL": "Нидерланды",
    "PL": "Польша",
    "PT": "Португалия",
    "RO": "Румыния",
    "SK": "Словакия",
    "SI": "Словения",
    "ES": "Испания",
    "SE": "Швеция",
    "CH": "Швейцария",
    "RU": "Россия",
    "US": "США",
}

_BY_NAME = {name.lower(): code for code, name in COUNTRIES.items()}
_BY_NAME.update({name.lower(): code for code, name in LOCAL_NAMES.items()})


def resolve_country_code(value: str | None) -> str | None:
    """Map a country name or ISO code to its upper-case ISO code."""
    if not value:
        return None
    key = value.strip()
    if key.upper() in COUNTRIES:
        return key.upper()
    lowered = key.lower()
    return _BY_NAME.get(lowered) or _ALIASES.get(lowered)

