from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar
from urllib.parse import quote

import requests

from countries_api.errors import (
    DataUnavailable,
    LookupNotFound,
    MalformedResponse,
    SourceError,
    SourceRejected,
    SourceUnreachable,
)
from countries_api.models import CanonicalCountry, RawRecord, SchemaFamily, Source
from countries_api.normalize import build_collection, normalize
from utils.logging_setup import get_logger
from utils.static_data import FALLBACK_COUNTRIES

logger = get_logger(__name__)

BASE_URL_V3 = "https://restcountries.com/v3.1"
BASE_URL_V2 = "https://restcountries.com/v2"
LEGACY_URL_V2 = "https://restcountries.eu/rest/v2"

# Tried in order; the first source that answers wins.
ALL_COUNTRIES_SOURCES: List[Source] = [
    Source(f"{BASE_URL_V3}/all", SchemaFamily.B),
    Source(f"{BASE_URL_V2}/all", SchemaFamily.A),
    Source(f"https://api.allorigins.win/raw?url={BASE_URL_V3}/all", SchemaFamily.B),
    Source("https://raw.githubusercontent.com/mledoze/countries/master/countries.json", SchemaFamily.B),
    Source(f"{LEGACY_URL_V2}/all", SchemaFamily.A),
]

BY_NAME_SOURCES: List[Source] = [
    Source(BASE_URL_V3 + "/name/{query}", SchemaFamily.B),
    Source(BASE_URL_V2 + "/name/{query}", SchemaFamily.A),
    Source(LEGACY_URL_V2 + "/name/{query}", SchemaFamily.A),
]

BY_CODE_SOURCES: List[Source] = [
    Source(BASE_URL_V3 + "/alpha/{query}", SchemaFamily.B),
    Source(BASE_URL_V2 + "/alpha/{query}", SchemaFamily.A),
    Source(LEGACY_URL_V2 + "/alpha/{query}", SchemaFamily.A),
]

T = TypeVar("T")


def _parse_collection(payload: Any, family: SchemaFamily) -> List[CanonicalCountry]:
    if not isinstance(payload, list) or not all(isinstance(r, dict) for r in payload):
        raise MalformedResponse("<collection>", f"expected a list of records, got {type(payload).__name__}")
    countries = build_collection(payload, family)
    if not countries:
        raise MalformedResponse("<collection>", "no usable country records")
    return countries


def _parse_single(payload: Any, family: SchemaFamily) -> CanonicalCountry:
    # name endpoints answer with a list of matches, alpha endpoints with either
    record = payload[0] if isinstance(payload, list) and payload else payload
    if not isinstance(record, dict) or not record:
        raise MalformedResponse("<single>", "no matching record in response")
    country = normalize(RawRecord(family, record))
    if not country.alpha3_code:
        raise MalformedResponse("<single>", "record has no alpha-3 code")
    return country


class CountryDataClient:
    """Fetches country data by trying each candidate source once, in order.

    There are no retries against a failing source: resilience comes from
    having several redundant sources, and from the bundled dataset when all
    of them are down.
    """

    def __init__(
        self,
        sources: Optional[Sequence[Source]] = None,
        timeout: float = 15.0,
        fallback: Optional[List[Dict[str, Any]]] = FALLBACK_COUNTRIES,
        session: Optional[requests.Session] = None,
        offline: bool = False,
        by_name_sources: Optional[Sequence[Source]] = None,
        by_code_sources: Optional[Sequence[Source]] = None,
    ):
        self.sources = list(sources if sources is not None else ALL_COUNTRIES_SOURCES)
        self.by_name_sources = list(by_name_sources if by_name_sources is not None else BY_NAME_SOURCES)
        self.by_code_sources = list(by_code_sources if by_code_sources is not None else BY_CODE_SOURCES)
        self.timeout = timeout
        self.fallback = fallback
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.offline = offline

    def _request_json(self, url: str) -> Any:
        if self.offline:
            raise RuntimeError("_request_json called in offline mode")
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise SourceUnreachable(url, str(e)) from e
        if not resp.ok:
            raise SourceRejected(url, resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponse(url, f"invalid JSON: {e}") from e

    def _first_success(
        self,
        sources: Sequence[Source],
        parse: Callable[[Any, SchemaFamily], T],
    ) -> Optional[T]:
        """Return the parsed result of the first source that works, else None."""
        total = len(sources)
        for i, source in enumerate(sources, start=1):
            logger.info("Trying endpoint %d/%d: %s", i, total, source.url)
            try:
                data = self._request_json(source.url)
                result = parse(data, source.family)
            except SourceError as e:
                # parser errors carry a placeholder url; log the source url
                logger.warning("Failed to load from %s: %s", source.url, e.reason)
                continue
            except (TypeError, ValueError, AttributeError) as e:
                # parseable JSON whose records do not fit either schema
                logger.warning("Malformed records from %s: %s", source.url, e)
                continue
            logger.info("Loaded from %s (schema %s)", source.url, source.family.value)
            return result
        return None

    def _fallback_collection(self) -> List[CanonicalCountry]:
        if self.fallback is None:
            raise DataUnavailable()
        logger.warning("Using bundled fallback data (%d countries)", len(self.fallback))
        return [CanonicalCountry.from_dict(d) for d in self.fallback]

    def get_all_countries(self) -> List[CanonicalCountry]:
        if self.offline:
            logger.info("Offline mode: skipping live endpoints")
            return self._fallback_collection()
        countries = self._first_success(self.sources, _parse_collection)
        if countries is not None:
            return countries
        logger.warning("All %d endpoints failed", len(self.sources))
        return self._fallback_collection()

    def _lookup(self, templates: Sequence[Source], query: str, offline_match: Callable[[CanonicalCountry], bool]) -> CanonicalCountry:
        if self.offline:
            if self.fallback is not None:
                for country in self._fallback_collection():
                    if offline_match(country):
                        return country
            raise LookupNotFound(f"Country {query!r} not found")
        sources = [t.format(quote(query, safe="")) for t in templates]
        country = self._first_success(sources, _parse_single)
        if country is None:
            raise LookupNotFound(f"Country {query!r} not found in any API")
        return country

    def get_by_name(self, name: str) -> CanonicalCountry:
        needle = name.strip().lower()
        return self._lookup(self.by_name_sources, name.strip(), lambda c: needle in c.name.lower())

    def get_by_code(self, code: str) -> CanonicalCountry:
        code = code.strip().upper()
        return self._lookup(
            self.by_code_sources,
            code,
            lambda c: code in (c.alpha2_code.upper(), c.alpha3_code),
        )
