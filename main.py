from __future__ import annotations

"""Command-line front-end for the country explorer data pipeline.

Usage (basic):
	python main.py list --search united --sort population
	python main.py show FRA
	python main.py fav toggle USA
	python main.py where 48.85 2.35
	python main.py export --output data

Key steps:
 1. Load every country from the first REST Countries endpoint that answers
    (bundled sample data if none do).
 2. Normalize both API schema versions into one record shape.
 3. Search / filter / sort in memory and print or export the result.

Favorites and the theme preference live in a small JSON store under
COUNTRIES_STATE_DIR (default ~/.country_explorer).

Set OFFLINE=1 to skip network calls and use the bundled sample only.
"""

import argparse
import csv
import json
import os
import sys
from pathlib import Path
from typing import Any, List

from catalog.query import ALL_REGIONS, SORT_KEYS
from catalog.state import AppState
from countries_api.errors import CountryDataError
from countries_api.models import CanonicalCountry
from countries_api.restcountries import CountryDataClient
from geo.bigdatacloud import ReverseGeocoder
from storage.local_store import LocalStore
from utils.formatting import format_area, format_population
from utils.logging_setup import get_logger
from utils.static_data import FALLBACK_COUNTRIES

logger = get_logger(__name__)

DEFAULT_STATE_DIR = Path.home() / ".country_explorer"


def coordinate(limit: float):
	def _parse(value: str) -> float:
		number = float(value)
		if not -limit <= number <= limit:
			raise argparse.ArgumentTypeError(f"{value} is outside -{limit:g}..{limit:g}")
		return number
	return _parse


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Browse country data from the REST Countries API")
	parser.add_argument("--offline", action="store_true", help="Force offline mode (bundled data, no network)")
	parser.add_argument("--timeout", type=float, default=15.0, help="HTTP timeout seconds")
	parser.add_argument("--no-fallback", action="store_true", help="Fail instead of using bundled data when every endpoint is down")
	parser.add_argument("--state-dir", type=str, default=None, help="Directory for favorites/theme (default: $COUNTRIES_STATE_DIR or ~/.country_explorer)")
	sub = parser.add_subparsers(dest="command", required=True)

	p_list = sub.add_parser("list", help="Search, filter and sort countries")
	p_list.add_argument("--search", type=str, default="", help="Case-insensitive name substring")
	p_list.add_argument("--region", type=str, default=ALL_REGIONS, help="Exact region name, or 'all'")
	p_list.add_argument("--sort", type=str, default="name", choices=SORT_KEYS, help="Sort order")
	p_list.add_argument("--limit", type=int, default=None, help="Limit number of rows")
	p_list.add_argument("--json", action="store_true", help="Print JSON instead of a table")

	p_show = sub.add_parser("show", help="Show one country with its neighbours")
	p_show.add_argument("code", nargs="?", help="Alpha-2 or alpha-3 code")
	p_show.add_argument("--name", type=str, default=None, help="Look up by name instead of code")

	p_fav = sub.add_parser("fav", help="Manage favorites")
	p_fav.add_argument("action", choices=["list", "add", "remove", "toggle"])
	p_fav.add_argument("code", nargs="?", help="Alpha-3 code")

	p_where = sub.add_parser("where", help="Find the country at the given coordinates")
	p_where.add_argument("latitude", type=coordinate(90))
	p_where.add_argument("longitude", type=coordinate(180))

	p_theme = sub.add_parser("theme", help="Show or toggle the theme preference")
	p_theme.add_argument("--toggle", action="store_true")

	p_export = sub.add_parser("export", help="Write the filtered list to JSON and CSV")
	p_export.add_argument("--output", type=str, default="data", help="Output directory")
	p_export.add_argument("--search", type=str, default="")
	p_export.add_argument("--region", type=str, default=ALL_REGIONS)
	p_export.add_argument("--sort", type=str, default="name", choices=SORT_KEYS)
	return parser.parse_args(argv)


def ensure_dir(path: Path) -> None:
	path.mkdir(parents=True, exist_ok=True)


def save_json(path: Path, data: Any) -> None:
	with path.open("w", encoding="utf-8") as f:
		json.dump(data, f, indent=2, ensure_ascii=False)


def countries_to_csv(countries: List[CanonicalCountry], csv_path: Path) -> None:
	headers = [
		"alpha3_code",
		"alpha2_code",
		"name",
		"capital",
		"region",
		"subregion",
		"population",
		"area",
		"languages",
		"currencies",
		"borders",
		"flag_url",
	]
	with csv_path.open("w", newline="", encoding="utf-8") as f:
		writer = csv.writer(f)
		writer.writerow(headers)
		for c in countries:
			writer.writerow([
				c.alpha3_code,
				c.alpha2_code,
				c.name,
				c.capital,
				c.region,
				c.subregion,
				c.population,
				c.area,
				";".join(lang.name for lang in c.languages),
				";".join(f"{cur.name} ({cur.symbol})" if cur.symbol else cur.name for cur in c.currencies),
				";".join(c.borders),
				c.flag_url,
			])


def print_table(countries: List[CanonicalCountry], state: AppState) -> None:
	for c in countries:
		star = "*" if state.favorites.is_favorite(c.alpha3_code) else " "
		print(f"{star} {c.alpha3_code}  {c.name:<40} {c.region:<10} {format_population(c.population):>8}  {c.capital}")
	print(f"{len(countries)} countries")


def print_country(country: CanonicalCountry, state: AppState) -> None:
	print(f"{country.name} ({country.alpha3_code})")
	print(f"  {country.region} • {country.subregion}")
	print(f"  Capital:    {country.capital}")
	print(f"  Population: {country.population:,}")
	print(f"  Area:       {format_area(country.area)}")
	print(f"  Languages:  {', '.join(lang.name for lang in country.languages) or 'N/A'}")
	print(f"  Currencies: {', '.join(cur.name for cur in country.currencies) or 'N/A'}")
	print(f"  Flag:       {country.flag_url or 'N/A'}")
	neighbours = state.border_countries(country)
	if neighbours:
		print(f"  Borders:    {', '.join(n.name for n in neighbours)}")
	if state.favorites.is_favorite(country.alpha3_code):
		print("  ★ favorite")


def run(args: argparse.Namespace) -> int:
	offline = args.offline or os.environ.get("OFFLINE") == "1"
	state_dir = Path(args.state_dir or os.environ.get("COUNTRIES_STATE_DIR") or DEFAULT_STATE_DIR)
	store = LocalStore(state_dir / "store.json")
	state = AppState(store, notify=print)

	if args.command == "theme":
		print(state.toggle_theme() if args.toggle else state.theme)
		return 0

	if args.command == "fav" and args.action != "list":
		if not args.code:
			raise SystemExit(f"fav {args.action} needs a country code")
		code = args.code.strip().upper()
		getattr(state.favorites, args.action)(code)
		return 0

	client = CountryDataClient(
		timeout=args.timeout,
		offline=offline,
		fallback=None if args.no_fallback else FALLBACK_COUNTRIES,
	)
	logger.info("Loading countries offline=%s", offline)
	state.load_countries(client)

	if args.command == "list":
		state.query.update(search_term=args.search, region=args.region, sort_key=args.sort)
		countries = state.visible_countries()
		if args.limit:
			countries = countries[: args.limit]
		if args.json:
			print(json.dumps([c.to_dict() for c in countries], indent=2, ensure_ascii=False))
		else:
			print_table(countries, state)
	elif args.command == "show":
		if args.name:
			country = client.get_by_name(args.name)
		elif args.code:
			country = state.find_by_code(args.code) or client.get_by_code(args.code)
		else:
			raise SystemExit("show needs a code or --name")
		print_country(country, state)
	elif args.command == "fav":
		favorites = state.favorite_countries()
		missing = [c for c in state.favorites if state.find_by_code(c) is None]
		print_table(favorites, state)
		if missing:
			print(f"Not loaded: {', '.join(missing)}")
	elif args.command == "where":
		country = state.find_my_country(ReverseGeocoder(timeout=args.timeout), args.latitude, args.longitude)
		print(f"You are in {country.name}!")
		print_country(country, state)
	elif args.command == "export":
		state.query.update(search_term=args.search, region=args.region, sort_key=args.sort)
		countries = state.visible_countries()
		output_root = Path(args.output)
		ensure_dir(output_root)
		save_json(output_root / "countries.json", [c.to_dict() for c in countries])
		countries_to_csv(countries, output_root / "countries.csv")
		logger.info("Exported %d countries to %s", len(countries), output_root)
	return 0


def main(argv: List[str] | None = None) -> int:
	args = parse_args(argv)
	try:
		return run(args)
	except CountryDataError as e:
		logger.error("%s", e)
		print(str(e), file=sys.stderr)
		return 1


if __name__ == "__main__":
	sys.exit(main())
