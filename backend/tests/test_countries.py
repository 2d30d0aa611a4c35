import pytest

from tradeslink.utils.countries import resolve_country_code


@pytest.mark.parametrize("value, expected", [
    ("Germany", "DE"),
    ("germany", "DE"),
    ("de", "DE"),
    ("PL", "PL"),
    ("Holland", "NL"),
    (" Poland ", "PL"),
    ("Чехия", "CZ"),
    ("Польша", "PL"),
    ("Словакия", "SK"),
    ("ГЕРМАНИЯ", "DE"),
])
def test_resolve_country_code(value, expected):
    assert resolve_country_code(value) == expected


@pytest.mark.parametrize("value", [None, "", "Atlantis"])
def test_unknown_country(value):
    assert resolve_country_code(value) is None
