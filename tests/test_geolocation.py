from __future__ import annotations

import pytest
import requests

from conftest import FakeResponse, FakeSession, make_country
from countries_api.errors import GeolocationDenied, GeolocationTimeout, GeolocationUnavailable
from geo.bigdatacloud import GEOCODE_URL, ReverseGeocoder
from utils.matching import CountryMatcher

COUNTRIES = [
    make_country("United States", "USA"),
    make_country("Russian Federation", "RUS"),
    make_country("Niger", "NER"),
    make_country("Nigeria", "NGA"),
]


def geocoder(outcome) -> ReverseGeocoder:
    return ReverseGeocoder(session=FakeSession({GEOCODE_URL: outcome}))


def test_lookup_returns_code_and_name():
    g = geocoder(FakeResponse(200, {"countryCode": "US", "countryName": "United States of America"}))
    result = g.lookup(40.7, -74.0)
    assert result.country_code == "US"
    assert result.country_name == "United States of America"
    assert g.session.params[0]["latitude"] == 40.7


@pytest.mark.parametrize(
    "outcome, error",
    [
        (requests.Timeout("slow"), GeolocationTimeout),
        (requests.ConnectionError("down"), GeolocationUnavailable),
        (FakeResponse(403), GeolocationDenied),
        (FakeResponse(500), GeolocationUnavailable),
        (FakeResponse(200, {"countryCode": "", "countryName": ""}), GeolocationUnavailable),
    ],
)
def test_lookup_errors(outcome, error):
    with pytest.raises(error):
        geocoder(outcome).lookup(1.0, 2.0)


def test_geolocation_errors_have_distinct_messages():
    messages = {GeolocationDenied.user_message, GeolocationUnavailable.user_message, GeolocationTimeout.user_message}
    assert len(messages) == 3


def test_lookup_rejects_impossible_coordinates():
    with pytest.raises(ValueError):
        geocoder(FakeResponse(200, {})).lookup(91.0, 0.0)


def test_code_match_is_case_insensitive_on_both_code_kinds():
    matcher = CountryMatcher(COUNTRIES)
    assert matcher.resolve("us", None).country.alpha3_code == "USA"
    assert matcher.resolve("rus", None).country.alpha3_code == "RUS"
    assert matcher.resolve("us", None).method == "code"


def test_name_fallback_matches_substrings_either_way():
    matcher = CountryMatcher(COUNTRIES)
    assert matcher.resolve("XX", "russia").country.alpha3_code == "RUS"
    assert matcher.resolve(None, "United States of America").country.alpha3_code == "USA"
    assert matcher.resolve(None, "United States of America").method == "name"


def test_exact_name_beats_substring():
    assert CountryMatcher(COUNTRIES).resolve(None, "nigeria").country.alpha3_code == "NGA"


def test_no_match():
    result = CountryMatcher(COUNTRIES).resolve("ZZ", "Atlantis")
    assert not result.matched
    assert result.to_dict()["alpha3Code"] is None
