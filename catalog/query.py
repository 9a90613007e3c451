from __future__ import annotations

import unicodedata
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterable, List, Tuple

from countries_api.models import CanonicalCountry

ALL_REGIONS = "all"

SORT_KEYS = ("name", "name-desc", "population", "population-asc")


def name_sort_key(name: str) -> Tuple[str, str]:
    """Accent- and case-insensitive ordering key; raw name breaks ties.

    Puts "Åland Islands" beside "Albania" rather than after "Zimbabwe".
    """
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, name


def _by_name(countries: List[CanonicalCountry], reverse: bool) -> List[CanonicalCountry]:
    return sorted(countries, key=lambda c: name_sort_key(c.name), reverse=reverse)


def _by_population(countries: List[CanonicalCountry], reverse: bool) -> List[CanonicalCountry]:
    return sorted(countries, key=lambda c: c.population, reverse=reverse)


_SORTERS: Dict[str, Callable[[List[CanonicalCountry]], List[CanonicalCountry]]] = {
    "name": lambda cs: _by_name(cs, reverse=False),
    "name-desc": lambda cs: _by_name(cs, reverse=True),
    "population": lambda cs: _by_population(cs, reverse=True),
    "population-asc": lambda cs: _by_population(cs, reverse=False),
}


def filter_countries(
    collection: Iterable[CanonicalCountry],
    search_term: str = "",
    region: str = ALL_REGIONS,
    sort_key: str = "name",
) -> List[CanonicalCountry]:
    """Search by name, then restrict to a region, then sort.

    Always returns a new list and never touches ``collection``. An unknown
    ``sort_key`` keeps the filtered input order.
    """
    result = list(collection)

    term = (search_term or "").lower()
    if term:
        result = [c for c in result if term in c.name.lower()]

    if region and region != ALL_REGIONS:
        result = [c for c in result if c.region == region]

    sorter = _SORTERS.get(sort_key)
    if sorter is not None:
        result = sorter(result)
    return result


def available_regions(collection: Iterable[CanonicalCountry]) -> List[str]:
    return sorted({c.region for c in collection}, key=name_sort_key)


@dataclass(frozen=True)
class QueryState:
    search_term: str = ""
    region: str = ALL_REGIONS
    sort_key: str = "name"


class QueryEngine:
    """Holds the current (search, region, sort) selection. Never persisted."""

    def __init__(self, state: QueryState = QueryState()):
        self.state = state

    def update(self, **changes: str) -> QueryState:
        self.state = replace(self.state, **changes)
        return self.state

    def reset(self) -> QueryState:
        self.state = QueryState()
        return self.state

    def apply(self, collection: Iterable[CanonicalCountry]) -> List[CanonicalCountry]:
        return filter_countries(
            collection,
            search_term=self.state.search_term,
            region=self.state.region,
            sort_key=self.state.sort_key,
        )
