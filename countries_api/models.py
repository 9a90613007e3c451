from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# Placeholder population, not an estimate. Used when a source gives neither
# population nor a usable area.
DEFAULT_POPULATION = 1_000_000
# Crude people-per-km² multiplier for sources that omit population.
POPULATION_PER_AREA = 1000


def resolve_population(population: Any, area: Any) -> int:
    if population is not None:
        return max(int(population), 0)
    if area:
        return max(int(float(area) * POPULATION_PER_AREA), 0)
    return DEFAULT_POPULATION


class SchemaFamily(str, enum.Enum):
    # flat v2 shape: name, alpha2Code, languages [{name}], currencies [{name, symbol}], flag
    A = "A"
    # nested v3.1 shape: name.common, cca2/cca3, capital [..], languages {code: name}, flags.png
    B = "B"


@dataclass(frozen=True)
class Source:
    """A candidate endpoint and the schema family it answers in.

    ``url`` may hold a ``{query}`` placeholder for the single-country endpoints.
    """

    url: str
    family: SchemaFamily

    def format(self, query: str) -> "Source":
        return Source(self.url.format(query=query), self.family)


@dataclass(frozen=True)
class RawRecord:
    family: SchemaFamily
    payload: Dict[str, Any]


@dataclass(frozen=True)
class Language:
    name: str


@dataclass(frozen=True)
class Currency:
    name: str
    symbol: str = ""


@dataclass(frozen=True)
class CanonicalCountry:
    name: str
    alpha2_code: str
    alpha3_code: str
    capital: str = "N/A"
    region: str = "Unknown"
    subregion: str = "N/A"
    population: int = 1_000_000
    area: float = 0.0
    flag_url: str = ""
    languages: Tuple[Language, ...] = field(default_factory=tuple)
    currencies: Tuple[Currency, ...] = field(default_factory=tuple)
    borders: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "alpha2Code": self.alpha2_code,
            "alpha3Code": self.alpha3_code,
            "capital": self.capital,
            "region": self.region,
            "subregion": self.subregion,
            "population": self.population,
            "area": self.area,
            "flagUrl": self.flag_url,
            "languages": [{"name": lang.name} for lang in self.languages],
            "currencies": [{"name": c.name, "symbol": c.symbol} for c in self.currencies],
            "borders": list(self.borders),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CanonicalCountry":
        """Inverse of :meth:`to_dict`, used for the bundled dataset."""
        languages: List[Language] = [Language(d["name"]) for d in data.get("languages") or []]
        currencies: List[Currency] = [
            Currency(d["name"], d.get("symbol") or "") for d in data.get("currencies") or []
        ]
        return cls(
            name=data["name"],
            alpha2_code=data.get("alpha2Code") or "",
            alpha3_code=data["alpha3Code"],
            capital=data.get("capital") or "N/A",
            region=data.get("region") or "Unknown",
            subregion=data.get("subregion") or "N/A",
            population=resolve_population(data.get("population"), data.get("area")),
            area=float(data.get("area") or 0),
            flag_url=data.get("flagUrl") or "",
            languages=tuple(languages),
            currencies=tuple(currencies),
            borders=tuple(data.get("borders") or ()),
        )
