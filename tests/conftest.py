from __future__ import annotations

import json
from typing import Any, Dict, List, Union

import pytest
import requests

from countries_api.models import CanonicalCountry


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Maps url -> FakeResponse or exception instance; records every call."""

    def __init__(self, routes: Dict[str, Union[FakeResponse, Exception]]):
        self.routes = routes
        self.headers: Dict[str, str] = {}
        self.calls: List[str] = []
        self.params: List[Any] = []

    def get(self, url: str, params: Any = None, timeout: float | None = None) -> FakeResponse:
        self.calls.append(url)
        self.params.append(params)
        outcome = self.routes.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"no route for {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def family_b(name: str, cca2: str, cca3: str, **extra: Any) -> Dict[str, Any]:
    record = {
        "name": {"common": name, "official": f"Official {name}"},
        "cca2": cca2,
        "cca3": cca3,
        "capital": ["Capital of " + name],
        "region": extra.pop("region", "Europe"),
        "population": extra.pop("population", 1000),
        "area": 10.0,
        "flags": {"png": f"https://flags.test/{cca2.lower()}.png", "svg": f"https://flags.test/{cca2.lower()}.svg"},
        "languages": {"eng": "English"},
        "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
        "borders": [],
    }
    record.update(extra)
    return record


def make_country(name: str, code: str, region: str = "Europe", population: int = 1000, **extra: Any) -> CanonicalCountry:
    return CanonicalCountry(
        name=name,
        alpha2_code=code[:2],
        alpha3_code=code,
        region=region,
        population=population,
        **extra,
    )


@pytest.fixture
def five_countries() -> List[CanonicalCountry]:
    return [
        make_country("United States", "USA", "Americas", 331_000_000),
        make_country("France", "FRA", "Europe", 67_000_000),
        make_country("United Kingdom", "GBR", "Europe", 67_200_000),
        make_country("United Arab Emirates", "ARE", "Asia", 9_900_000),
        make_country("Brazil", "BRA", "Americas", 212_000_000),
    ]
