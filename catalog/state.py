from __future__ import annotations

from typing import Callable, Dict, List, Optional

from catalog.favorites import FavoritesStore
from catalog.query import QueryEngine, available_regions
from countries_api.errors import LookupNotFound
from countries_api.models import CanonicalCountry
from countries_api.restcountries import CountryDataClient
from geo.bigdatacloud import ReverseGeocoder
from storage.local_store import LocalStore, MemoryStore
from utils.logging_setup import get_logger
from utils.matching import CountryMatcher

logger = get_logger(__name__)

THEME_KEY = "theme"
THEMES = ("light", "dark")


class AppState:
    """Everything the front-end reads: loaded countries, favorites, query and theme.

    One instance is built by the composition root and handed to whatever
    renders it; nothing here is module-global.
    """

    def __init__(
        self,
        store: Optional[LocalStore] = None,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.store = store if store is not None else MemoryStore()
        self.favorites = FavoritesStore(self.store, notify=notify)
        self.query = QueryEngine()
        self._countries: List[CanonicalCountry] = []
        self._by_code: Dict[str, CanonicalCountry] = {}

    @property
    def countries(self) -> List[CanonicalCountry]:
        return list(self._countries)

    def set_countries(self, countries: List[CanonicalCountry]) -> None:
        self._countries = list(countries)
        self._by_code = {c.alpha3_code: c for c in self._countries}

    def load_countries(self, client: CountryDataClient) -> List[CanonicalCountry]:
        self.set_countries(client.get_all_countries())
        logger.info("Loaded %d countries", len(self._countries))
        return self.countries

    def visible_countries(self) -> List[CanonicalCountry]:
        return self.query.apply(self._countries)

    def regions(self) -> List[str]:
        return available_regions(self._countries)

    def find_by_code(self, code: str) -> Optional[CanonicalCountry]:
        return self._by_code.get(code.strip().upper())

    def favorite_countries(self) -> List[CanonicalCountry]:
        # favorites that are not loaded right now are simply not shown
        return [self._by_code[c] for c in self.favorites if c in self._by_code]

    def border_countries(self, country: CanonicalCountry) -> List[CanonicalCountry]:
        return [self._by_code[code] for code in country.borders if code in self._by_code]

    def find_my_country(self, geocoder: ReverseGeocoder, latitude: float, longitude: float) -> CanonicalCountry:
        geo = geocoder.lookup(latitude, longitude)
        match = CountryMatcher(self._countries).resolve(geo.country_code, geo.country_name)
        if match.country is None:
            raise LookupNotFound(f'Country "{geo.country_name or geo.country_code}" not found in database')
        logger.info("You are in %s (matched by %s)", match.country.name, match.method)
        return match.country

    @property
    def theme(self) -> str:
        value = self.store.get(THEME_KEY)
        return value if value in THEMES else THEMES[0]

    def toggle_theme(self) -> str:
        new = "dark" if self.theme == "light" else "light"
        self.store.set(THEME_KEY, new)
        return new
