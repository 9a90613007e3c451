from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from countries_api.models import CanonicalCountry
from utils.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass
class MatchResult:
    code: Optional[str]
    name: Optional[str]
    country: Optional[CanonicalCountry]
    method: str

    @property
    def matched(self) -> bool:
        return self.country is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "matched": self.matched,
            "method": self.method,
            "alpha3Code": self.country.alpha3_code if self.country else None,
        }


class CountryMatcher:
    """Finds a loaded country from a reverse-geocode answer.

    Codes are compared case-insensitively against alpha-2 and alpha-3; names
    fall back to equality, then substring containment in either direction
    ("Russia" finds "Russian Federation" and the other way round).
    """

    def __init__(self, countries: Sequence[CanonicalCountry]):
        self.countries = countries

    def match_code(self, code: Optional[str]) -> Optional[CanonicalCountry]:
        if not code:
            return None
        wanted = code.strip().upper()
        for c in self.countries:
            if wanted in (c.alpha2_code.upper(), c.alpha3_code.upper()):
                return c
        return None

    def match_name(self, name: Optional[str]) -> Optional[CanonicalCountry]:
        if not name:
            return None
        wanted = name.strip().lower()
        names: List[str] = [c.name.lower() for c in self.countries]
        for c, candidate in zip(self.countries, names):
            if candidate == wanted:
                return c
        for c, candidate in zip(self.countries, names):
            if candidate and (wanted in candidate or candidate in wanted):
                return c
        return None

    def resolve(self, code: Optional[str], name: Optional[str]) -> MatchResult:
        country = self.match_code(code)
        if country is not None:
            return MatchResult(code, name, country, "code")
        country = self.match_name(name)
        if country is not None:
            logger.debug("Matched %r by name to %s", name, country.alpha3_code)
            return MatchResult(code, name, country, "name")
        return MatchResult(code, name, None, "none")
