"""Convert raw country records from either REST Countries schema into CanonicalCountry.

Everything in here is pure: no network, no logging side effects beyond the
collection builder reporting skipped records. Missing optional fields are
replaced by documented defaults instead of raising, so one sparse record never
sinks a whole collection.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from countries_api.models import (
    CanonicalCountry,
    Currency,
    Language,
    RawRecord,
    SchemaFamily,
    resolve_population,
)
from utils.logging_setup import get_logger

logger = get_logger(__name__)

FLAG_CDN_TEMPLATE = "https://flagcdn.com/w320/{code}.png"


def resolve_flag_url(png: Optional[str], svg: Optional[str], alpha2_code: Optional[str]) -> str:
    if png:
        return png
    if svg:
        return svg
    if alpha2_code:
        return FLAG_CDN_TEMPLATE.format(code=alpha2_code.lower())
    return ""


def _text(value: Any, default: str = "") -> str:
    """Scalar field as a string; numbers are stringified, containers rejected."""
    if value is None or value == "":
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"expected a string, got {type(value).__name__}")


def _area(value: Any) -> float:
    if not value:
        return 0.0
    return max(float(value), 0.0)


def _borders(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    # dict.fromkeys keeps source order while dropping repeats
    return tuple(dict.fromkeys(str(v).upper() for v in values or () if v))


def _flags(payload: Mapping[str, Any]) -> Tuple[Optional[str], Optional[str]]:
    flags = payload.get("flags")
    if isinstance(flags, dict):
        return _text(flags.get("png")) or None, _text(flags.get("svg")) or None
    # some mirrors hand back flags as [svg, png]
    if isinstance(flags, list):
        png = next((f for f in flags if isinstance(f, str) and f.endswith(".png")), None)
        svg = next((f for f in flags if isinstance(f, str) and f.endswith(".svg")), None)
        return png, svg
    return None, None


def normalize_family_a(payload: Mapping[str, Any]) -> CanonicalCountry:
    alpha2 = _text(payload.get("alpha2Code"))
    png, svg = _flags(payload)
    flag = payload.get("flag")
    # v2 "flag" is the svg url; v1-era mirrors put an emoji there
    if not svg and isinstance(flag, str) and flag.startswith("http"):
        svg = flag

    languages = [
        Language(_text(lang.get("name")))
        for lang in payload.get("languages") or []
        if isinstance(lang, dict)
    ]
    currencies = [
        Currency(_text(cur.get("name")), _text(cur.get("symbol")))
        for cur in payload.get("currencies") or []
        if isinstance(cur, dict)
    ]
    return CanonicalCountry(
        name=_text(payload.get("name")),
        alpha2_code=alpha2,
        alpha3_code=_text(payload.get("alpha3Code")).upper(),
        capital=_text(payload.get("capital"), "N/A"),
        region=_text(payload.get("region"), "Unknown"),
        subregion=_text(payload.get("subregion"), "N/A"),
        population=resolve_population(payload.get("population"), payload.get("area")),
        area=_area(payload.get("area")),
        flag_url=resolve_flag_url(png, svg, alpha2),
        languages=tuple(languages),
        currencies=tuple(currencies),
        borders=_borders(payload.get("borders")),
    )


def _common_name(name: Any) -> str:
    if isinstance(name, dict):
        return _text(name.get("common")) or _text(name.get("official"))
    return _text(name)


def _first_capital(capital: Any) -> str:
    if isinstance(capital, list):
        return _text(capital[0], "N/A") if capital else "N/A"
    return _text(capital, "N/A")


def _currency(value: Any) -> Currency:
    if isinstance(value, dict):
        return Currency(_text(value.get("name")), _text(value.get("symbol")))
    return Currency(_text(value), "")


def normalize_family_b(payload: Mapping[str, Any]) -> CanonicalCountry:
    alpha2 = _text(payload.get("cca2"))
    png, svg = _flags(payload)
    languages: Dict[str, Any] = payload.get("languages") or {}
    currencies: Dict[str, Any] = payload.get("currencies") or {}
    return CanonicalCountry(
        name=_common_name(payload.get("name")),
        alpha2_code=alpha2,
        alpha3_code=_text(payload.get("cca3")).upper(),
        capital=_first_capital(payload.get("capital")),
        region=_text(payload.get("region"), "Unknown"),
        subregion=_text(payload.get("subregion"), "N/A"),
        population=resolve_population(payload.get("population"), payload.get("area")),
        area=_area(payload.get("area")),
        flag_url=resolve_flag_url(png, svg, alpha2),
        languages=tuple(Language(_text(name)) for name in languages.values()),
        currencies=tuple(_currency(cur) for cur in currencies.values()),
        borders=_borders(payload.get("borders")),
    )


_NORMALIZERS = {
    SchemaFamily.A: normalize_family_a,
    SchemaFamily.B: normalize_family_b,
}


def normalize(record: RawRecord) -> CanonicalCountry:
    return _NORMALIZERS[record.family](record.payload)


def build_collection(payloads: Iterable[Any], family: SchemaFamily) -> List[CanonicalCountry]:
    """Normalize a full-list response, keeping alpha-3 codes unique.

    Records without an alpha-3 code cannot be cross-referenced and are skipped,
    as are records whose values have the wrong type; for duplicate codes the
    first record wins.
    """
    countries: List[CanonicalCountry] = []
    seen = set()
    for index, payload in enumerate(payloads):
        try:
            country = normalize(RawRecord(family, payload))
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping malformed record #%d: %s", index, e)
            continue
        if not country.alpha3_code:
            logger.warning("Skipping record without alpha-3 code: %r", country.name)
            continue
        if country.alpha3_code in seen:
            logger.debug("Duplicate alpha-3 code %s ignored", country.alpha3_code)
            continue
        seen.add(country.alpha3_code)
        countries.append(country)
    return countries
